import argparse
import logging
import os
import shlex
import traceback
from typing import Dict, List, Optional

from dotenv import load_dotenv

from prompt_toolkit import prompt
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import FileHistory

from . import multikey
from .curve import lift_x
from .errors import KeyPairError
from .key_pair import KeyPair
from .private_key import PrivateKey
from .public_key import PublicKey

logger = logging.getLogger(__name__)


class ActionArgumentCompleter(Completer):
    ACTION_ARGUMENTS = {
        "generate": [],
        "derive": ["key=", "secret="],
        "pubkey": [],
        "encode": [],
        "decode": [],
        "liftx": ["parity="],
        "help": [],
    }

    def get_completions(self, document, complete_event):
        word_before_cursor = document.get_word_before_cursor(WORD=True)

        if ' ' not in document.text:
            # user is typing the action
            for action in self.ACTION_ARGUMENTS.keys():
                if action.startswith(word_before_cursor):
                    yield Completion(action, start_position=-len(word_before_cursor))
        else:
            # user is typing an argument, find which are valid
            action = document.text.split()[0]
            for argument in self.ACTION_ARGUMENTS.get(action, []):
                if argument not in document.text and argument.startswith(word_before_cursor):
                    yield Completion(argument, start_position=-len(word_before_cursor))


actions = list(ActionArgumentCompleter.ACTION_ARGUMENTS.keys())

HELP = """\
generate                          new random key pair
derive key=<hex> | secret=<int>   key pair from a private key
pubkey <hex>                      describe a 32 or 33 byte public key
encode <hex>                      multikey of a 32 or 33 byte public key
decode <multibase>                x-only key of a multikey
liftx <hex> [parity=02|03]        uncompressed point of an x-only key
"""


def parse_args_dict(args: List[str]) -> Dict[str, str]:
    """Parses "name=value" items, recording positional arguments with keys @0, @1, ..."""
    args_dict = {}
    pos_count = 0
    for item in args:
        parts = item.strip().split('=', 1)
        if len(parts) == 2:
            param, value = parts
            args_dict[param] = value
        else:
            args_dict['@' + str(pos_count)] = parts[0]
            pos_count += 1
    return args_dict


def print_public_key(public_key: PublicKey):
    print(f"public key:   {public_key.hex()}")
    print(f"x-only:       {public_key.x.hex()}")
    print(f"parity:       {public_key.parity:#04x}")
    print(f"multibase:    {public_key.multibase}")


def print_key_pair(key_pair: KeyPair):
    if key_pair.has_private_key():
        print(f"private key:  {key_pair.private_key.hex()}")
    print_public_key(key_pair.public_key)


def execute_command(input_line: str):
    # consider lines starting with '#' (possibly prefixed with whitespaces) as comments
    if input_line.strip().startswith("#"):
        return

    # Split into a command and the list of arguments
    try:
        input_line_list = shlex.split(input_line)
    except ValueError as e:
        print(f"Invalid command: {str(e)}")
        return

    # Ensure input_line_list is not empty
    if input_line_list:
        action = input_line_list[0].strip()
    else:
        return

    args_dict = parse_args_dict(input_line_list[1:])

    logger.debug("executing action %s", action)

    if action == "":
        return
    elif action not in actions:
        print("Invalid action")
        return
    elif action == "help":
        print(HELP, end="")
    elif action == "generate":
        print_key_pair(KeyPair.generate())
    elif action == "derive":
        if "key" in args_dict:
            key_pair = KeyPair.from_private_key(bytes.fromhex(args_dict["key"]))
        elif "secret" in args_dict:
            key_pair = KeyPair.from_secret(int(args_dict["secret"], 0))
        else:
            raise ValueError("Missing argument: key= or secret=")
        print_key_pair(key_pair)
    elif action == "pubkey":
        print_public_key(PublicKey(bytes.fromhex(args_dict["@0"])))
    elif action == "encode":
        print(PublicKey(bytes.fromhex(args_dict["@0"])).encode())
    elif action == "decode":
        decoded = multikey.decode(args_dict["@0"])
        print(f"prefix:       {decoded.prefix.hex()}")
        print(f"x-only:       {decoded.public_key.hex()}")
    elif action == "liftx":
        parity = int(args_dict["parity"], 16) if "parity" in args_dict else None
        print(lift_x(bytes.fromhex(args_dict["@0"]), parity).hex())


def cli_main(history_file: str):
    completer = ActionArgumentCompleter()
    # Create a history object
    history = FileHistory(history_file)

    while True:
        try:
            input_line = prompt("🔑 ", history=history, completer=completer)
            execute_command(input_line)
        except (KeyboardInterrupt, EOFError):
            raise  # exit
        except KeyPairError as err:
            print(f"Error: {err} ({err.get_code()})")
        except Exception as err:
            print(f"Error: {err}")
            print(traceback.format_exc())


def script_main(script_filename: str) -> bool:
    """Executes each line of the script as a command, stopping at the first error. Returns True on success."""
    with open(script_filename, "r") as script_file:
        for input_line in script_file:
            try:
                execute_command(input_line)
            except Exception as e:
                print(f"Error executing command: {input_line.strip()} - Error: {str(e)}")
                return False
    return True


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    log_file = os.getenv("KEYPAIR_LOG_FILE", "keypair-cli.log")
    log_level = os.getenv("KEYPAIR_LOG_LEVEL", "DEBUG")
    history_file = os.getenv("KEYPAIR_HISTORY_FILE", ".keypair-history")

    parser = argparse.ArgumentParser(description="secp256k1 / BIP340 key tool")

    # Script file option
    parser.add_argument("--script", "-s", type=str, help="Execute commands from script file")

    args = parser.parse_args(argv)

    if not isinstance(logging.getLevelName(log_level.upper()), int):
        print(f"Unknown KEYPAIR_LOG_LEVEL {log_level!r}, using DEBUG")
        log_level = "DEBUG"

    logging.basicConfig(filename=log_file, level=log_level.upper())

    if args.script:
        return 0 if script_main(args.script) else 1

    try:
        cli_main(history_file)
    except (KeyboardInterrupt, EOFError):
        pass  # exit
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
