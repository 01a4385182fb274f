"""
Numberle - command line version

Run: numberle [--fixed] [--equations PATH] [--show-target] [--no-errors]
"""

import argparse
from typing import Callable, List, Optional

from .config.app_config import Config
from .config.game_settings import EQUATION_LENGTH, load_equation_list
from .models.game import ResultCode
from .services.game_session import GameSession
from .utils.game_logger import game_logger
from .utils.messages import format_classification, format_feedback, result_message


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Guess the hidden 7-character equation in a few attempts."
    )
    parser.add_argument(
        "--fixed",
        action="store_true",
        help="Always play the fixed equation instead of a random one.",
    )
    parser.add_argument(
        "--equations",
        type=str,
        default=Config.EQUATIONS_FILE,
        help="Text file with one candidate equation per line.",
    )
    parser.add_argument(
        "--show-target",
        action="store_true",
        help="Print the target equation when the game starts (debugging).",
    )
    parser.add_argument(
        "--no-errors",
        action="store_true",
        help="Do not explain why a guess was rejected.",
    )
    return parser


def play(session: GameSession,
         read_line: Optional[Callable[[str], str]] = None,
         show_target: bool = False,
         show_errors: bool = True) -> bool:
    """Runs one game on the terminal; returns True when the player won."""
    read_line = read_line or input
    session.start_new_game()
    print("\nWelcome to Numberle - CLI Version")
    print(f"You have {session.get_remaining_attempts()} attempts to guess. "
          f"The equation only has {EQUATION_LENGTH} characters.")
    if show_target:
        print(f"Target: {session.get_target()}")

    while not session.is_game_over():
        try:
            guess = read_line("Enter your guess: ").rstrip("\r\n")
        except EOFError:
            print("\nGoodbye!")
            return False

        result = session.submit_guess(guess)
        if result is ResultCode.ACCEPTED:
            print(f"{guess}\n{format_feedback(session.get_position_feedback())}")
        elif show_errors:
            print(result_message(result, guess))

        if session.is_game_over():
            break

        print(f"Unused characters: {session.get_unused_characters()}")
        print(format_classification(session.get_classification_sets()))
        print(f"\nTry again. You have {session.get_remaining_attempts()} attempts left.")

    attempts_used = session.max_attempts - session.get_remaining_attempts()
    if session.is_game_won():
        print("You won!!")
        game_logger.log_game_event(None, 'game_won', 'local',
                                   attempts_used=attempts_used, target_equation=session.get_target())
    else:
        print(f"You Lost! The correct equation is: {session.get_target()}")
        game_logger.log_game_event(None, 'game_lost', 'local',
                                   attempts_used=attempts_used, target_equation=session.get_target())
    return session.is_game_won()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    session = GameSession(
        equations=load_equation_list(args.equations),
        max_attempts=Config.MAX_ATTEMPTS,
        random_target=Config.RANDOM_TARGET and not args.fixed
    )
    try:
        play(session, show_target=args.show_target, show_errors=not args.no_errors)
    except KeyboardInterrupt:
        print("\nGoodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
