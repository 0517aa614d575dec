# Configuration: digits, code length, commands, etc.
DEFAULT_RULES = {
    "name": "cows_and_bulls",  # Identifier for this ruleset
    "code_length": 4,  # Number of digits in the secret number
    "digits": "0123456789",  # Allowed symbols, leading zero permitted
    "allow_duplicates": False,  # Digits of a number must be unique
    "opener": "0123",  # First guess suggested by the minimax solver
    "commands": {
        "quit": ["q", "quit", "exit"],
        "help": ["h", "help", "?"],
        "stats": ["s", "stats"],
        "board": ["b", "board"],
        "restart": ["r", "restart"],
    },
    "assistant_commands": {
        "quit": ["q", "quit", "exit"],
        "help": ["h", "help", "?"],
        "print": ["p", "print"],
        "history": ["l", "history"],
        "undo": ["u", "undo"],
        "drop": ["d", "drop"],
        "suggest": ["s", "suggest"],
        "reset": ["r", "reset"],
    },
}
