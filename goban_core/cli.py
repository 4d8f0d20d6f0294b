from __future__ import annotations

import argparse
import logging
import os
from typing import Dict, List, Optional

from .errors import GobanError
from .machine import Button, Outcome, Phase, new_game
from .render import TextRenderer
from .state_token import deserialize, token_from_artifact


def _button_lookup(outcome: Outcome) -> Dict[str, Button]:
    lookup: Dict[str, Button] = {}
    for row in outcome.components:
        for button in row:
            if not button.disabled:
                lookup[button.label.lower()] = button
                lookup[button.custom_id] = button
    return lookup


def _print_outcome(outcome: Outcome, renderer: TextRenderer) -> None:
    print(renderer.render(outcome.board))
    print('Token:', outcome.token)
    print(outcome.message.replace('**', ''))
    for row in outcome.components:
        labels: List[str] = []
        for button in row:
            labels.append(f"({button.label})" if button.disabled else f"[{button.label}]")
        print(' '.join(labels))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Hot-seat Go over state tokens')
    parser.add_argument('--size', type=int, default=9, help='Board size (NxN), 1..19')
    parser.add_argument('--data', default=None, help='Base-64 packed cells for the starting position')
    parser.add_argument('--token', default=None, help='Resume from a state token or artifact name')
    parser.add_argument('--show', action='store_true', help='Print the board and token, then exit')
    args = parser.parse_args(argv)

    logging.basicConfig(level=os.getenv('GOBAN_LOG_LEVEL', 'WARNING').upper())
    renderer = TextRenderer()

    try:
        if args.token:
            board = deserialize(token_from_artifact(args.token))
            outcome = Outcome(Phase.AWAITING_COLUMN, board, board.turn)
        else:
            outcome = new_game(args.size, data=args.data)
    except GobanError as e:
        parser.error(str(e))

    if args.show:
        print(renderer.render(outcome.board))
        print('Token:', outcome.token)
        return

    _print_outcome(outcome, renderer)
    while not outcome.is_terminal:
        try:
            text = input('Press a button: ').strip()
        except EOFError:
            print()
            return
        lookup = _button_lookup(outcome)
        button = lookup.get(text) or lookup.get(text.lower())
        if button is None:
            print('No such button. Try again.')
            continue
        result = outcome.advance(button.custom_id)
        if result.phase == Phase.REJECTED:
            print(result.message.replace('**', ''))
            continue
        outcome = result
        _print_outcome(outcome, renderer)


if __name__ == '__main__':
    main()
