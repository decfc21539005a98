#!/usr/bin/env python3


"""Computes a minimal edit script between two sequences."""


import argparse
import logging
import os


from enum import Enum
from grid import Grid
from typing import Any, List, NamedTuple, Optional, Sequence


class Action(Enum):
    INSERT = 1
    SUBSTITUTE = 2
    DELETE = 3
    # Reserved for move detection. calculate_diff never produces it.
    MOVE = 4


class Edit(NamedTuple):
    """A single edit.

    For INSERT and SUBSTITUTE, destination is an index into the destination
    sequence. For DELETE, it is an index into the origin sequence.
    """
    action: Action
    value: Any
    destination: int

    def __str__(self) -> str:
        return (f'Edit: <{self.action.name.capitalize()} {self.value!r} '
                f'at {self.destination}>')


Script = List[Edit]


class Step(NamedTuple):
    """A table cell.

    cost is the minimal number of edits between the two prefixes. edit is the
    last edit of the chosen script, or None where the cell continues the
    script of its diagonal neighbor unchanged.
    """
    cost: int
    edit: Optional[Edit]


Table = Grid[Step]


def matrix(origin: Sequence[Any], destination: Sequence[Any]) -> Table:
    height = len(origin) + 1
    width = len(destination) + 1
    result: Table = Grid(height, width, Step(0, None))
    for i, value in enumerate(origin):
        result[i + 1, 0] = Step(i + 1, Edit(Action.DELETE, value, i))
    for j, value in enumerate(destination):
        result[0, j + 1] = Step(j + 1, Edit(Action.INSERT, value, j))
    for j, destination_value in enumerate(destination):
        for i, origin_value in enumerate(origin):
            if origin_value == destination_value:
                result[i + 1, j + 1] = Step(result[i, j].cost, None)
                continue
            del_cost = result[i, j + 1].cost
            ins_cost = result[i + 1, j].cost
            sub_cost = result[i, j].cost
            # Ties go to deletion, then insertion, then substitution.
            if del_cost <= ins_cost and del_cost <= sub_cost:
                step = Step(del_cost + 1,
                        Edit(Action.DELETE, origin_value, i))
            elif ins_cost <= del_cost and ins_cost <= sub_cost:
                step = Step(ins_cost + 1,
                        Edit(Action.INSERT, destination_value, j))
            else:
                assert sub_cost < del_cost and sub_cost < ins_cost
                step = Step(sub_cost + 1,
                        Edit(Action.SUBSTITUTE, destination_value, j))
            result[i + 1, j + 1] = step
    return result


def distance(table: Table) -> int:
    return table[table.rows - 1, table.columns - 1].cost


def script(table: Table) -> Script:
    """Reads the edit script off a table built by matrix.

    Walks from the final cell back to the origin, following each cell's edit
    to the neighbor it was derived from.
    """
    result: Script = []
    i = table.rows - 1
    j = table.columns - 1
    while i > 0 or j > 0:
        edit = table[i, j].edit
        if edit is None:
            i -= 1
            j -= 1
            continue
        result.append(edit)
        if edit.action == Action.DELETE:
            i -= 1
        elif edit.action == Action.INSERT:
            j -= 1
        else:
            assert edit.action == Action.SUBSTITUTE
            i -= 1
            j -= 1
    assert i == 0 and j == 0
    result.reverse()
    return result


def calculate_diff(origin: Sequence[Any], destination: Sequence[Any]) -> Script:
    """Returns a shortest edit script turning origin into destination.

    Elements are compared with ==, which must be reflexive and symmetric.
    Among several shortest scripts, the one returned is fixed by the order in
    which the table is filled and by the tie-breaking in matrix.
    """
    table = matrix(origin, destination)
    logging.info('Origin length %d, destination length %d, distance %d',
            len(origin), len(destination), distance(table))
    if logging.getLogger().isEnabledFor(logging.DEBUG):
        logging.debug('Table:\n%s', pp_grid(table, origin, destination))
    edits = script(table)
    for edit in edits:
        logging.debug(edit)
    return edits


def patch(origin: Sequence[Any], edits: Script) -> List[Any]:
    """Applies a script returned by calculate_diff to origin.

    While the script is applied, the edited sequence is always a prefix of
    the destination followed by a suffix of the origin. Insert and substitute
    positions can therefore be used as they are, while delete positions are
    shifted by the number of inserts minus deletes applied so far.
    """
    result = list(origin)
    offset = 0
    for edit in edits:
        if edit.action == Action.INSERT:
            check_position(edit, edit.destination, len(result) + 1)
            result.insert(edit.destination, edit.value)
            offset += 1
        elif edit.action == Action.SUBSTITUTE:
            check_position(edit, edit.destination, len(result))
            result[edit.destination] = edit.value
        elif edit.action == Action.DELETE:
            check_position(edit, edit.destination + offset, len(result))
            del result[edit.destination + offset]
            offset -= 1
        else:
            raise ValueError(f'cannot apply {edit}')
    return result


def check_position(edit: Edit, position: int, limit: int) -> None:
    if not 0 <= position < limit:
        raise IndexError(f'{edit} does not apply at position {position}')


def pp_grid(table: Table, origin: Sequence[Any],
        destination: Sequence[Any]) -> str:
    """Pretty-print the costs of a table
    """
    cells = [['', ''] + [str(v) for v in destination]]
    for i in range(table.rows):
        label = str(origin[i - 1]) if i > 0 else ''
        cells.append([label] + [str(table[i, j].cost)
                for j in range(table.columns)])
    width = max(len(c) for row in cells for c in row)
    return os.linesep.join(
        ' '.join(c.rjust(width) for c in row)
        for row in cells
    )


def main(argv: Optional[Sequence[str]]=None) -> None:
    arg_parser = argparse.ArgumentParser(description=__doc__)
    arg_parser.add_argument('path1', help='origin file')
    arg_parser.add_argument('path2', help='destination file')
    arg_parser.add_argument('-c', '--chars', action='store_true',
            help='Compare characters instead of lines.')
    arg_parser.add_argument('-v', '--verbose', action='count', default=0,
            help='Verbosity. Give once for sizes and distance, twice for '
            'debugging.')
    args = arg_parser.parse_args(argv)
    if args.verbose == 1:
        logging.basicConfig(level=logging.INFO)
    elif args.verbose >= 2:
        logging.basicConfig(level=logging.DEBUG)
    with open(args.path1) as f1, open(args.path2) as f2:
        text1 = f1.read()
        text2 = f2.read()
    if args.chars:
        origin: Sequence[str] = text1
        destination: Sequence[str] = text2
    else:
        origin = text1.splitlines()
        destination = text2.splitlines()
    edits = calculate_diff(origin, destination)
    for edit in edits:
        print(edit)
    print(f'distance: {len(edits)}')


if __name__ == '__main__':
    main()
