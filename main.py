# main.py
"""
Main entry point for the Flowchart Agent.
CLI interface for text and PDF processing.
"""

import argparse
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from flowchart_agent import FlowchartAgent
from flowchart_generator import GraphvizCanvas
from llm_client import llm_client
from text_source import read_text_file, extract_pdf_text, TextSourceError


def _load_input(args) -> str:
    if args.command == "pdf":
        with open(args.input_file, "rb") as f:
            return extract_pdf_text(f.read())
    return read_text_file(args.input_file)


def main():
    parser = argparse.ArgumentParser(
        description="Flowchart Agent - Break text down into a flowchart",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py text notes.txt
  python main.py text notes.txt --info -o flowchart.png
  python main.py pdf report.pdf --connectors -o flowchart.png
  python main.py --check
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Input type")

    for name, help_text in (("text", "Process a text file"), ("pdf", "Process a PDF file")):
        sp = subparsers.add_parser(name, help=help_text)
        sp.add_argument("input_file", help="Input file path")
        sp.add_argument("--info", action="store_true",
                        help="Also draw summary, title and statistics boxes")
        sp.add_argument("--connectors", action="store_true",
                        help="Draw lines between consecutive steps")
        sp.add_argument("-o", "--output", help="Write the rendered canvas to this PNG file")

    parser.add_argument("--check", action="store_true", help="Check LLM availability")

    args = parser.parse_args()

    if args.check:
        if not llm_client.has_credentials():
            print("✗ No API key (set DEEPSEEK_API_KEY) — local fallbacks only")
            return 1
        if not llm_client.is_available():
            print(f"✗ Cannot connect to {llm_client.config.base_url}")
            return 1
        print("✓ LLM provider reachable")
        print(f"  Model: {llm_client.config.model}")
        print(f"  Server: {llm_client.config.base_url}")
        return 0 if llm_client.test_generation() else 1

    if not args.command:
        parser.print_help()
        return 1

    if not os.path.exists(args.input_file):
        print(f"Error: File not found: {args.input_file}")
        return 1

    try:
        text = _load_input(args)
    except TextSourceError as e:
        print(f"Error: {e}")
        return 1
    if not text.strip():
        print("Error: No text to process")
        return 1

    agent = FlowchartAgent()
    agent.simplify(text)
    print("\nSimplified Text:")
    print(agent.simplified_text)

    canvas = GraphvizCanvas()
    if not agent.create_flowchart(canvas, connectors=args.connectors):
        print(f"Error: {agent.error}")
        return 1
    if args.info and not agent.create_info_boxes(canvas):
        print(f"Error: {agent.error}")
        return 1

    if args.output:
        png = canvas.render_png()
        if not png:
            return 1
        with open(args.output, "wb") as f:
            f.write(png)
        print(f"  📁 Flowchart: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
