#!/usr/bin/env python3
# faq_chat/cli/ask_cli.py - Command-line interface for asking FAQ questions
import argparse
import json
import sys
from typing import Any

import requests

from ..core.config import Settings, load_config
from ..core.exceptions import FaqChatException
from ..domain.models import AnswerResult
from ..infrastructure import JsonFileDocumentRepository
from ..services.chat_service import ChatService


def make_request(method: str, url: str, data: dict[str, Any] = None) -> dict[str, Any]:
    """Make HTTP request to API"""
    try:
        if method.upper() == "GET":
            response = requests.get(url, timeout=10)
        elif method.upper() == "POST":
            response = requests.post(url, json=data, timeout=10)
        else:
            raise ValueError(f"Unsupported method: {method}")

        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException as e:
        print(f"❌ API request failed: {e}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"❌ Invalid JSON response: {e}")
        sys.exit(1)


def build_service(data_path: str | None, mode: str | None, config_file: str | None) -> ChatService:
    """Build a local chat service from config plus command-line overrides"""
    config = load_config(config_file)
    if data_path:
        config["documents"]["path"] = data_path
    if mode:
        config["retrieval"]["mode"] = mode
        # Weights from the config belong to the configured mode
        config["retrieval"]["title_weight"] = None
        config["retrieval"]["body_weight"] = None

    settings = Settings.from_config(config)
    return ChatService.from_settings(settings, JsonFileDocumentRepository(settings.data_path))


def print_answer(payload: dict[str, Any]):
    """Pretty-print a chat response payload"""
    print(f"\n💬 {payload['answer']}")

    citations = payload.get("citations", [])
    if citations:
        print(f"\n📚 Sources ({len(citations)}):")
        for i, c in enumerate(citations, 1):
            print(f"   [{i}] {c['title']} ({c['id']}) score={c['score']}")
            print(f"       {c['snippet']}")

    hints = payload.get("hints")
    if hints:
        print(f"\n🏷️  Categories: {', '.join(hints.get('categories', []))}")
        suggestions = hints.get("suggestions", [])
        if suggestions:
            print("💡 Try asking about:")
            for s in suggestions:
                print(f"   - {s['title']} ({s['id']})")

    meta = payload.get("meta", {})
    print(f"\n⏱️  {meta.get('model', '?')} / {meta.get('latencyMs', 0)} ms")


def ask(args) -> AnswerResult | dict[str, Any]:
    if args.base_url:
        data = {"message": args.question}
        if args.topk is not None:
            data["topk"] = args.topk
        return make_request("POST", f"{args.base_url}/api/chat", data)

    service = build_service(args.data, args.mode, args.config)
    return service.ask(args.question, k=args.topk)


def categories(args):
    if args.base_url:
        payload = make_request("GET", f"{args.base_url}/api/categories")
    else:
        store = build_service(args.data, None, args.config).get_store()
        payload = {"categories": [{"name": n, "count": c} for n, c in store.categories()]}

    if args.json:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    print("🏷️  Categories:")
    for category in payload["categories"]:
        print(f"   {category['name']}: {category['count']}")


def main(argv: list[str] | None = None):
    # Source and output options, accepted after any subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--data", help="Path to the FAQ JSON file")
    common.add_argument("--config", help="Path to config.yml")
    common.add_argument("--base-url", help="Ask a running API server instead of the local file")
    common.add_argument("--json", action="store_true", help="Print raw JSON")

    parser = argparse.ArgumentParser(description="FAQ Q&A CLI")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    ask_parser = subparsers.add_parser("ask", parents=[common], help="Ask a question")
    ask_parser.add_argument("question", help="Question text")
    ask_parser.add_argument("--topk", type=int, help="Number of citations")
    ask_parser.add_argument(
        "--mode", choices=["containment", "set"], help="Keyword matching mode"
    )

    subparsers.add_parser("categories", parents=[common], help="List document categories")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    try:
        if args.command == "ask":
            result = ask(args)
            payload = result.to_dict() if isinstance(result, AnswerResult) else result
            if args.json:
                print(json.dumps(payload, ensure_ascii=False, indent=2))
            else:
                print_answer(payload)
        elif args.command == "categories":
            categories(args)
    except FaqChatException as e:
        print(f"❌ {e.message}")
        sys.exit(1)


if __name__ == "__main__":
    main()
