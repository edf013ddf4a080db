from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import IO, Iterable

from .card import Card
from .config import DEFAULT_CONFIG_PATH, StudyConfig, load_config
from .loader import ParseError, load_path
from .logging_utils import get_logger, setup_logging
from .manager import CardsManager
from .utils import make_rng

logger = get_logger(__name__)

NO_CARD_TEXT = "(no card)"

HELP_TEXT = "commands: n=next p=previous c=current f=flip h=hint r=reset s=shuffle a=replay seen q=quit"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="flashcard_study")
    p.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Config path (JSON)")
    sub = p.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print a deck as it would be drawn")
    show.add_argument("--deck", required=True, help="Deck CSV path (front,back,hint)")

    study = sub.add_parser("study", help="Run an interactive study session over stdin")
    study.add_argument("--deck", required=True, help="Deck CSV path (front,back,hint)")
    study.add_argument("--shuffle", action="store_true", default=None, help="Shuffle the deck before studying")
    study.add_argument("--seed", type=int, default=None, help="Random seed for shuffling")

    return p


def _render(manager: CardsManager[Card]) -> str:
    handle = manager.current_card()
    card = handle() if handle is not None else None
    text = str(card) if card is not None else NO_CARD_TEXT
    return f"{text}\nseen={manager.num_of_cards_seen()} unseen={manager.num_of_cards_in_deck()}"


def run_session(manager: CardsManager[Card], commands: Iterable[str], out: IO[str]) -> int:
    """Drive ``manager`` with one-letter commands, printing the current card after each.

    Returns the number of commands applied. Unknown commands print the help line.
    """
    actions = {
        "n": manager.next_card,
        "p": manager.previous_card,
        "c": manager.current_card,
        "f": manager.flip_current_card,
        "h": manager.try_flip_current_card_to_hint,
        "r": manager.reset_current_card_state,
        "s": manager.shuffle,
        "a": manager.add_previous_cards_to_deck,
    }
    applied = 0
    for raw in commands:
        cmd = raw.strip().lower()
        if not cmd:
            continue
        if cmd == "q":
            break
        action = actions.get(cmd)
        if action is None:
            print(HELP_TEXT, file=out)
            continue
        action()
        applied += 1
        print(_render(manager), file=out)
    return applied


def cmd_show(args: argparse.Namespace, cfg: StudyConfig) -> int:
    try:
        deck = load_path(args.deck)
    except (ParseError, OSError) as e:
        print(f"load_failed: {e}")
        return 1
    print(", ".join(str(card) for card in reversed(list(deck))))
    return 0


def cmd_study(args: argparse.Namespace, cfg: StudyConfig) -> int:
    try:
        deck = load_path(args.deck)
    except (ParseError, OSError) as e:
        print(f"load_failed: {e}")
        return 1

    seed = args.seed if args.seed is not None else cfg.seed
    shuffle = args.shuffle if args.shuffle is not None else cfg.shuffle

    manager = CardsManager.create_from_deck(deck, rng=make_rng(seed))
    if shuffle:
        manager.shuffle()

    print(HELP_TEXT)
    print(_render(manager))
    applied = run_session(manager, sys.stdin, sys.stdout)
    logger.info("session finished commands=%d seen=%d", applied, manager.num_of_cards_seen())
    return 0


def _load_study_config(config_path: str) -> StudyConfig:
    # The shipped default is optional when running outside the repo root.
    if config_path == DEFAULT_CONFIG_PATH and not Path(config_path).exists():
        return StudyConfig()
    return load_config(config_path)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = _load_study_config(args.config)
    except (OSError, ValueError) as e:
        print(f"config_failed: {e}")
        return 1
    setup_logging(cfg.log_level)

    if args.command == "show":
        return cmd_show(args, cfg)

    if args.command == "study":
        return cmd_study(args, cfg)

    raise SystemExit(2)


if __name__ == "__main__":
    raise SystemExit(main())
