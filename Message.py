import sys
import time
from colorama import Fore

DEBUG_MODE = False

def set_debug(enabled=True):
    global DEBUG_MODE
    DEBUG_MODE = bool(enabled)

def _emit(tag, color, msg):
    stamp = time.strftime("%H:%M:%S")
    print(f" ** <{stamp}> [{color}{tag}{Fore.RESET}] {msg}", file=sys.stderr)

def debug(msg):
    if DEBUG_MODE:
        _emit("dbg", Fore.CYAN, msg)

def warning(msg):
    _emit("war", Fore.YELLOW, msg)
