#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfvm import Interpreter


def main():
    # Never halts: the first cell stays non-zero forever.
    interpreter = Interpreter("+[>+<]", memory_size=4)

    budget = 25
    for _ in range(budget):
        if interpreter.is_halted:
            break
        interpreter.step()

    print(f"stopped after {interpreter.steps} steps, halted={interpreter.is_halted}")
    print(interpreter.dump())


if __name__ == "__main__":
    main()
