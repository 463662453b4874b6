# src/llm_tasks/system_prompt.py

"""
System prompts for the four extraction calls.
Each asks for bare JSON so the response can be parsed directly.
"""


NODES_SYSTEM_PROMPT = (
    "You are a helpful assistant that simplifies text and breaks it down "
    "into flowchart nodes. Each node should be a clear, concise step or "
    "concept. Return ONLY the JSON array of nodes, without any explanation. "
    "The JSON array should contain objects with 'title' and 'description' "
    "keys."
)

SUMMARY_SYSTEM_PROMPT = (
    "You are a helpful assistant that summarizes text. Write a short summary "
    "of at most five sentences. Return ONLY a JSON object of the form "
    "{\"summary\": \"...\"}, without any explanation."
)

TITLE_SYSTEM_PROMPT = (
    "You are a helpful assistant that writes titles. Give the text a short "
    "title of at most eight words. Return ONLY a JSON object of the form "
    "{\"title\": \"...\"}, without any explanation."
)

STATS_SYSTEM_PROMPT = (
    "You are a helpful assistant that extracts key statistics. List at most "
    "three of the most important numeric facts in the text, each as a short "
    "phrase including the number. Return ONLY a JSON object of the form "
    "{\"stats\": [\"...\", \"...\"]}, without any explanation."
)


def nodes_user_prompt(text: str) -> str:
    return f"Please break down this text into flowchart nodes: {text}"


def summary_user_prompt(text: str) -> str:
    return f"Please summarize this text: {text}"


def title_user_prompt(text: str) -> str:
    return f"Please write a title for this text: {text}"


def stats_user_prompt(text: str) -> str:
    return f"Please extract the key statistics from this text: {text}"
