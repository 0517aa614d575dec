# # Command-line interface (text-based play)

from game.board import Board, GameStatus
from game.errors import (
    GameInputError,
    InconsistentHistoryError,
    InputStreamClosed,
)
from game.guess import parse_observation
from game.ruleset import DEFAULT_RULES
from solver.session import AnalysisSession


GAME_HELP = [
    "r, restart    - Restart game",
    "q, quit, exit - Quit game",
    "h, help, ?    - This text",
    "s, stats      - Check out some hints on potential digit positions",
    "b, board      - Show your guesses so far",
    "<NNNN>        - Enter four unique digits to guess the number and win",
]

ASSISTANT_HELP = [
    "<NNNN> <B> <C> - Record a guess with its bulls and cows, e.g. 1234 1 1",
    "p, print       - List the numbers still possible",
    "l, history     - List the recorded observations",
    "u, undo        - Forget the last observation",
    "d, drop <N>    - Forget observation number N",
    "s, suggest     - Suggest a next guess",
    "r, reset       - Forget all observations",
    "h, help, ?     - This text",
    "q, quit, exit  - Quit",
]


def read_input(prompt, read_line=None):
    """Read one stripped line; end of input becomes InputStreamClosed."""
    try:
        return (read_line or input)(prompt).strip()
    except EOFError:
        raise InputStreamClosed("Input closed.") from None


def _command(user_input, commands):
    # map an alias like 'q' to its command name
    key = user_input.split()[0].lower()
    for name, aliases in commands.items():
        if key in aliases:
            return name
    return None


def describe_feedback(feedback):
    """Human readable phrase for a (bulls, cows) pair."""
    bulls, cows = feedback
    if bulls == 0 and cows == 0:
        return "Nothing found"
    b = "bull" if bulls == 1 else "bulls"
    c = "cow" if cows == 1 else "cows"
    return f"Found {bulls} {b} and {cows} {c}"


def gameloop(board=None, read_line=None, rules=None):
    """
    Play until the number is guessed or the player quits.

    Returns:
        Board: The board of the last game, WON or ABORTED.
    """
    rules = rules or DEFAULT_RULES
    commands = rules["commands"]
    b = board or Board(rules=rules)

    print("Guess the number! (Enter 'q' to quit, 'h' for help)")

    while not b.is_over:
        try:
            user_input = read_input(f"{b.current_attempt} > ", read_line)
        except (InputStreamClosed, KeyboardInterrupt):
            b.abort()
            print("\nExiting game.")
            break

        if not user_input:
            continue

        # handle special commands
        command = _command(user_input, commands)
        if command == "quit":
            b.abort()
            print("Exiting game.")
            break
        elif command == "help":
            for line in GAME_HELP:
                print(line)
            continue
        elif command == "stats":
            for line in b.hints.render():
                print(line)
            continue
        elif command == "board":
            b.render()
            continue
        elif command == "restart":
            b.reset()
            print("New game started.")
            continue

        # Make the guess
        try:
            guess = b.submit_guess(user_input)
        except GameInputError as e:
            print(f"{e} Enter 'h' for help.")
            continue

        if b.resolve() is GameStatus.WON:
            print(f"You won in {b.current_attempt} tries!")
        else:
            print(describe_feedback(guess.feedback))

    return b


def assistant_loop(session=None, read_line=None, rules=None):
    """
    Collect observations and show which numbers are still possible.

    Returns:
        AnalysisSession: The session as it was when the loop ended.
    """
    rules = rules or DEFAULT_RULES
    commands = rules["assistant_commands"]
    s = session or AnalysisSession(rules=rules)

    print("Cows and Bulls assistant. Enter '<guess> <bulls> <cows>', "
          "'p' to print candidates, 'h' for help.")

    while True:
        try:
            user_input = read_input(f"{len(s.candidates)} > ", read_line)
        except (InputStreamClosed, KeyboardInterrupt):
            print("\nExiting.")
            break

        if not user_input:
            continue

        command = _command(user_input, commands)
        if command == "quit":
            break
        elif command == "help":
            for line in ASSISTANT_HELP:
                print(line)
        elif command == "print":
            print_candidates(s)
        elif command == "history":
            if not s.observations:
                print("No observations yet.")
            for i, obs in enumerate(s.observations, start=1):
                print(f"{i}. {obs}")
        elif command == "undo":
            try:
                removed = s.undo()
            except IndexError:
                print("Nothing to undo.")
                continue
            print(f"Removed {removed}. {len(s.candidates)} candidates.")
        elif command == "drop":
            try:
                index = int(user_input.split()[1]) - 1
                removed = s.discard(index)
            except (IndexError, ValueError):
                print(
                    "Usage: drop <N>, N between 1 and "
                    f"{len(s.observations)}."
                )
                continue
            print(f"Removed {removed}. {len(s.candidates)} candidates.")
        elif command == "suggest":
            print(f"Try {s.suggest()}")
        elif command == "reset":
            s.reset()
            print("All observations removed.")
        else:
            try:
                s.add(parse_observation(user_input, rules=rules))
            except (GameInputError, InconsistentHistoryError) as e:
                print(e)
                continue
            print(f"{len(s.candidates)} candidates left.")

    return s


def print_candidates(session):
    """One number per line in ascending order, then a count line."""
    candidates = session.report()
    for code in candidates:
        print(code)
    if session.is_narrowed:
        print(f"{len(candidates)} candidates.")
    else:
        print(f"{len(candidates)} candidates (no observations yet).")
