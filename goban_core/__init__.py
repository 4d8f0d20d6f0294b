"""
goban core Python package.

Everything needed to play Go through stateless request/response exchanges,
where the whole game travels inside an opaque state token.
Modules:
- board.py: Board, cell states and the 2-bit packed codec
- state_token.py: StateToken, serialize/deserialize
- moves.py: move identifiers and button ids
- rules.py: the legality hook
- machine.py: column/row selection state machine
- render.py: Renderer protocol and TextRenderer
"""
