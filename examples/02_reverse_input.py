#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfvm.api import run_string


def main():
    # Read until input runs out (',' reads 0), then walk back printing each cell.
    code = ">,[>,]<[.<]"

    text = sys.argv[1] if len(sys.argv) > 1 else "stressed"
    result = run_string(code, input=text)
    print(result.output)


if __name__ == "__main__":
    main()
