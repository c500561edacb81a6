#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfvm.api import run_string


def main():
    code = """
    Classic greeting; anything that is not one of the eight commands is a comment

    ++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]
    >>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++.
    """

    result = run_string(code)
    sys.stdout.write(result.output)
    print(f"({result.steps} steps)")


if __name__ == "__main__":
    main()
