"""The playing side: read turns from the game master and answer with moves."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from fillerbot.board import InputError, parse_player, read_turn
from fillerbot.strategy import Strategy


def play(lines: Iterable[str], out: TextIO) -> int:
    """Play a whole game from ``lines``, writing one ``"y x"`` move per turn.

    Returns the number of moves written. Raises InputError if the player
    line is missing or malformed, or if a turn is cut short.
    """
    it = iter(lines)
    try:
        header = next(it)
    except StopIteration:
        raise InputError("input ended before the player line") from None
    me, op = parse_player(header)
    strategy = Strategy(me, op)

    moves = 0
    while True:
        try:
            turn = read_turn(it, op)
        except EOFError:
            break
        move = strategy.next_move(turn)
        out.write(f"{move.y} {move.x}\n")
        out.flush()
        moves += 1
    return moves


def main(argv: list[str] | None = None) -> int:
    """Play on standard input and output; return the exit status."""
    try:
        play(sys.stdin, sys.stdout)
    except InputError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())