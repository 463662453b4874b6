# src/llm_client.py

"""
LLM Client for OpenAI-compatible chat-completion APIs (DeepSeek by default).
Any failure is reported on the console and returned as None so callers
can degrade to their local fallback. No retries.
Integrated with TokenTracker for per-call token counting.
"""

import json
import time
from typing import Optional

import requests

from config import llm_config, llm_params


def _token_count(usage: dict, key: str) -> int:
    """Provider token count, or 0 when missing or not an integer."""
    value = usage.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return 0


class ChatClient:
    """Client for a chat-completion endpoint. One request per call."""

    def __init__(self, config=None, params=None):
        self.config = config or llm_config
        self.params = params or llm_params
        self._tracker = None

    def set_tracker(self, tracker):
        """Attach a TokenTracker to record all calls."""
        self._tracker = tracker

    def has_credentials(self) -> bool:
        """True when an API key is configured."""
        return self.config.has_credentials

    def _headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }

    def generate(
        self,
        prompt: str,
        system_prompt: str = None,
        temperature: float = None,
        call_name: str = None
    ) -> Optional[str]:
        """
        Send one chat-completion request and return the message content.
        Records token usage if tracker is attached.

        Args:
            prompt: User message text.
            system_prompt: Optional system instruction.
            temperature: Override temperature.
            call_name: Name for token tracking (e.g., "NodeExtraction").

        Returns:
            The content string, or None when there is no credential, the
            service is unreachable, answers non-2xx, or the envelope is
            malformed.
        """
        if not self.has_credentials():
            print("    [LLM] ⚠ No API key configured — skipping request")
            return None

        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        payload = {
            "model": self.config.model,
            "messages": messages,
            "temperature": (
                temperature if temperature is not None
                else self.params.temperature
            ),
        }

        prompt_preview = prompt[:80].replace('\n', ' ')
        start = time.time()

        try:
            print(
                f"    [LLM] Sending ({len(prompt)} chars): "
                f"\"{prompt_preview}...\""
            )

            response = requests.post(
                self.config.completions_url,
                headers=self._headers(),
                data=json.dumps(payload),
                timeout=(
                    self.params.connect_timeout,
                    self.params.read_timeout
                )
            )

            if not response.ok:
                elapsed = time.time() - start
                print(
                    f"    [LLM] ✗ HTTP {response.status_code} "
                    f"({elapsed:.1f}s)"
                )
                print(f"    [LLM]   Response: {response.text[:200]}")
                self._record_call(
                    call_name, prompt, system_prompt, None, elapsed, 0, 0
                )
                return None

            data = response.json()
            content = data["choices"][0]["message"]["content"]
            if content is not None and not isinstance(content, str):
                raise TypeError(f"content is {type(content).__name__}, not a string")
            usage = data.get("usage") or {}
            if not isinstance(usage, dict):
                raise TypeError(f"usage is {type(usage).__name__}, not an object")
            elapsed = time.time() - start

        except requests.exceptions.ConnectionError:
            print(f"    [LLM] ✗ Cannot connect to {self.config.base_url}")
            self._record_call(
                call_name, prompt, system_prompt, None,
                time.time() - start, 0, 0
            )
            return None
        except requests.exceptions.Timeout:
            print(
                f"    [LLM] ✗ Timeout (connect {self.params.connect_timeout}s, "
                f"read {self.params.read_timeout}s)"
            )
            self._record_call(
                call_name, prompt, system_prompt, None,
                time.time() - start, 0, 0
            )
            return None
        except (ValueError, KeyError, IndexError, TypeError) as e:
            print(f"    [LLM] ✗ Malformed response envelope: {e}")
            self._record_call(
                call_name, prompt, system_prompt, None,
                time.time() - start, 0, 0
            )
            return None
        except requests.exceptions.RequestException as e:
            print(f"    [LLM] ✗ Error: {type(e).__name__}: {e}")
            self._record_call(
                call_name, prompt, system_prompt, None,
                time.time() - start, 0, 0
            )
            return None

        result = (content or "").strip()
        prompt_tokens = _token_count(usage, "prompt_tokens")
        response_tokens = _token_count(usage, "completion_tokens")

        if result:
            token_info = ""
            if prompt_tokens > 0:
                token_info = f" [tokens: {prompt_tokens}→{response_tokens}]"
            print(f"    [LLM] ✓ {len(result)} chars in {elapsed:.1f}s{token_info}")
        else:
            print(f"    [LLM] ⚠ Empty response after {elapsed:.1f}s")

        self._record_call(
            call_name, prompt, system_prompt, result,
            elapsed, prompt_tokens, response_tokens
        )
        return result if result else None

    def _record_call(
        self, call_name, prompt, system_prompt, response,
        duration, actual_prompt, actual_response
    ):
        """Record call to tracker if attached."""
        if self._tracker and call_name:
            self._tracker.record(
                call_name=call_name,
                prompt=prompt or "",
                response=response or "",
                duration=duration,
                system_prompt=system_prompt or "",
                actual_prompt_tokens=actual_prompt,
                actual_response_tokens=actual_response
            )

    def is_available(self) -> bool:
        """Check that the provider answers with the configured key."""
        if not self.has_credentials():
            return False
        try:
            response = requests.get(
                f"{self.config.base_url.rstrip('/')}/models",
                headers=self._headers(),
                timeout=10
            )
            return response.status_code == 200
        except requests.exceptions.RequestException:
            return False

    def test_generation(self) -> bool:
        """Quick test to verify the model can generate."""
        print("    [LLM] Running generation test...")
        result = self.generate(
            prompt="Reply with only the word: OK",
            call_name="Test"
        )
        if result:
            print(f"    [LLM] Test passed: '{result[:20]}'")
            return True
        print("    [LLM] Test FAILED — model cannot generate")
        return False


# Default client
llm_client = ChatClient()
