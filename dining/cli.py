"""Command-line entry point of the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Sequence

from dining.params import ParamError, parse_int, parse_params
from dining.table import Table


def _as_int32(value: int) -> int:
    return (value + (1 << 31)) % (1 << 32) - (1 << 31)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from arguments and return the exit status.

    The arguments are: number of philosophers, time to die, time to eat,
    time to sleep and, optionally, the number of meals each must eat.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        return 1
    nb_philos = _as_int32(parse_int(args[0]))
    if nb_philos <= 0:
        return 1
    try:
        params = parse_params(args)
    except ParamError as error:
        sys.stdout.write(f"{error}\n")
        sys.stdout.flush()
        return 1
    Table(nb_philos, params, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())