#!/usr/bin/env python3
"""
Dictionary Service CLI
Run the web API, look up a single word, or parse a saved results page
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add the package to path
sys.path.insert(0, str(Path(__file__).parent))

from core.config import config, validate_config


def _print_entry(entry) -> int:
    print(json.dumps(entry.to_dict(), indent=2, ensure_ascii=False))
    return 0 if entry.found else 1


def cmd_serve(args) -> int:
    import uvicorn
    from web_apps.dictionary_api import create_app

    validate_config()
    uvicorn.run(create_app(), host=args.host or config.get_host(), port=args.port or config.get_port())
    return 0


def cmd_lookup(args) -> int:
    from core.user_agents import UserAgentPool
    from harvesters.google_dictionary_fetcher import GoogleDictionaryFetcher

    user_agents = UserAgentPool()
    if not args.default_agent:
        user_agents.load()

    async def run():
        async with GoogleDictionaryFetcher(user_agents) as fetcher:
            return await fetcher.lookup(args.word.lower())

    outcome = asyncio.run(run())
    if outcome.status != 200:
        print(f"[ERROR] Upstream returned status {outcome.status}", file=sys.stderr)
        return 2
    return _print_entry(outcome.entry)


def cmd_parse(args) -> int:
    from core.google_dictionary_parser import parse_html

    path = Path(args.file)
    if not path.exists():
        print(f"[ERROR] File not found: {path}", file=sys.stderr)
        return 2
    return _print_entry(parse_html(path.read_text(encoding='utf-8')))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Google Dictionary Service CLI')
    parser.add_argument('--log-level', default=None,
                        help='Logging level (default from DICT_LOG_LEVEL or INFO)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    serve = subparsers.add_parser('serve', help='Run the dictionary web API')
    serve.add_argument('--host', default=None, help='Bind address')
    serve.add_argument('--port', type=int, default=None, help='Bind port')
    serve.set_defaults(func=cmd_serve)

    lookup = subparsers.add_parser('lookup', help='Look up a word and print its JSON entry')
    lookup.add_argument('word')
    lookup.add_argument('--default-agent', action='store_true',
                        help='Skip downloading the user-agent list')
    lookup.set_defaults(func=cmd_lookup)

    parse = subparsers.add_parser('parse', help='Extract the entry from a saved results page')
    parse.add_argument('file')
    parse.set_defaults(func=cmd_parse)

    args = parser.parse_args(argv)
    logging.basicConfig(**config.get_logging_config(args.log_level))

    try:
        return args.func(args)
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\n[INFO] Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
