"""Command-line entry point for expressgen.

Usage::

    expressgen my-app --language typescript --no-database
    expressgen --interactive
    python -m expressgen my-app --dry-run

Exit codes: 0 on completion, 1 when the target folder already exists or a
file-system error occurs, 2 for an invalid option.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any, Sequence

from rich.prompt import Confirm, Prompt

from expressgen.config import Config, PromptDefaults
from expressgen.errors import DirectoryExists, FileSystemError, InvalidOption
from expressgen.scaffolder import Language, OptionSet, ProjectGenerator, build_options
from expressgen.scaffolder.options import FEATURE_NAMES
from expressgen.utils import (
    console,
    print_error,
    print_header,
    print_next_steps,
    print_success,
    print_summary_table,
    print_tree,
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID = 2

# Feature flag -> (CLI switch, interactive question)
_FEATURE_SWITCHES: dict[str, tuple[str, str]] = {
    "use_database": ("--database", "Do you want to use MongoDB?"),
    "enable_cors": ("--cors", "Enable CORS middleware?"),
    "use_error_handling": (
        "--error-handling",
        "Include a global error handling middleware?",
    ),
    "use_env_file": ("--env-file", "Create a .env file for environment variables?"),
    "use_request_logging": (
        "--request-logging",
        "Use Morgan for HTTP request logging?",
    ),
    "use_linting": ("--linting", "Enable ESLint for code linting?"),
}


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expressgen",
        description="Node.js & Express project generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  expressgen my-app\n"
            "  expressgen my-api --language typescript --no-database --request-logging\n"
            "  expressgen --interactive\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Project (and folder) name; prompts interactively when omitted",
    )
    parser.add_argument(
        "--language", "-l",
        default=None,
        help="javascript or typescript (default: javascript)",
    )
    for field, (switch, question) in _FEATURE_SWITCHES.items():
        parser.add_argument(
            switch,
            dest=field,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=question,
        )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project folder is created in (default: current directory)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (output directory, npm versions, defaults)",
    )
    parser.add_argument(
        "--interactive", "-i",
        action="store_true",
        help="Ask every question interactively",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the files that would be generated without writing anything",
    )
    return parser


# ---------------------------------------------------------------------------
# Option collection
# ---------------------------------------------------------------------------


def prompt_answers(defaults: PromptDefaults) -> dict[str, Any]:
    """Ask the generator questions on the console.

    The project name is asked again until it passes validation.
    """
    while True:
        name = Prompt.ask(
            "Enter project name", default=defaults.project_name, console=console
        )
        try:
            build_options(project_name=name)
        except InvalidOption as exc:
            print_error(exc.message)
            continue
        break

    language = Prompt.ask(
        "Choose project language",
        choices=[lang.value for lang in Language],
        default=Language.parse(defaults.language).value,
        console=console,
    )
    answers: dict[str, Any] = {
        "project_name": name,
        "language": Language.parse(language),
    }
    for field, (_switch, question) in _FEATURE_SWITCHES.items():
        answers[field] = Confirm.ask(
            question, default=getattr(defaults, field), console=console
        )
    return answers


def answers_from_args(args: argparse.Namespace, defaults: PromptDefaults) -> dict[str, Any]:
    """Merge command-line switches over the configured defaults."""
    answers: dict[str, Any] = {
        "project_name": args.project_name,
        "language": Language.parse(args.language or defaults.language),
    }
    for field in FEATURE_NAMES:
        value = getattr(args, field)
        answers[field] = getattr(defaults, field) if value is None else value
    return answers


def _load_config(args: argparse.Namespace) -> Config:
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    # An unknown default language is a configuration error.
    Language.parse(config.defaults.language)
    if args.output:
        config = config.model_copy(update={"output_dir": Path(args.output)})
    return config


def _summary(options: OptionSet, config: Config) -> dict[str, str]:
    data = {
        "Project": options.project_name,
        "Language": options.language.value,
        "Location": str(Path(config.output_dir) / options.project_name),
    }
    for field in FEATURE_NAMES:
        switch = _FEATURE_SWITCHES[field][0].lstrip("-")
        data[switch] = "yes" if getattr(options, field) else "no"
    return data


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def run(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_config(args)
    except (OSError, ValueError) as exc:
        print_error(f"Error: could not load configuration: {exc}")
        return EXIT_INVALID

    print_header("🚀 Welcome to Node-js & Express-js Project Generator!")

    try:
        if args.interactive or args.project_name is None:
            answers = prompt_answers(config.defaults)
        else:
            answers = answers_from_args(args, config.defaults)
        options = build_options(**answers)
    except (InvalidOption, ValueError) as exc:
        print_error(f"Error: {exc}")
        return EXIT_INVALID

    generator = ProjectGenerator(config)
    print_summary_table(_summary(options, config), title="Project options")

    if args.dry_run:
        print_tree(generator.preview(options))
        print_success("Dry run complete, nothing was written.")
        return EXIT_OK

    try:
        tree = asyncio.run(generator.generate(options))
    except DirectoryExists:
        print_error("❌ Folder already exists!")
        return EXIT_FAILURE
    except FileSystemError as exc:
        print_error(f"❌ {exc}")
        return EXIT_FAILURE

    print_tree(tree)
    print_success(f"✅ Project {options.project_name} created successfully!")
    print_next_steps(options.project_name)
    return EXIT_OK


def main() -> None:
    """CLI entry point for ``expressgen`` and ``python -m expressgen``."""
    sys.exit(run())


if __name__ == "__main__":
    main()
