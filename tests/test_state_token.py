import random
import unittest

from game import (
    BLACK,
    EMPTY,
    WHITE,
    Board,
    InvalidTokenError,
    StateToken,
    artifact_name,
    deserialize,
    serialize,
    token_from_artifact,
)

EMPTY_9X9 = "9x9_0_-1x-1_-1x-1_" + "A" * 28


class TestStateToken(unittest.TestCase):
    def test_given_empty_9x9_when_serialized_then_wire_format(self):
        self.assertEqual(serialize(Board.create(9, 9)), EMPTY_9X9)

    def test_given_white_to_move_when_serialized_then_turn_field_is_one(self):
        board = Board.create(3, 3)
        board.set(0, 0, BLACK)
        board.turn = WHITE
        token = serialize(board)
        self.assertTrue(token.startswith("3x3_1_-1x-1_-1x-1_"))
        self.assertEqual(token.split("_", 4)[4], "AQAA")

    def test_given_any_size_when_round_trip_then_board_and_turn_restored(self):
        rng = random.Random(99)
        for w in range(1, 20):
            for h in range(1, 20):
                cells = [rng.choice((EMPTY, BLACK, WHITE)) for _ in range(w * h)]
                board = Board(width=w, height=h, cells=cells, turn=rng.choice((BLACK, WHITE)))
                self.assertEqual(deserialize(serialize(board)), board, f"mismatch for {w}x{h}")

    def test_given_token_when_parsed_then_fields_exposed(self):
        tok = StateToken.parse(EMPTY_9X9)
        self.assertEqual((tok.width, tok.height, tok.turn), (9, 9, 0))
        self.assertEqual(tok.reserved, ("-1", "-1", "-1", "-1"))
        self.assertEqual(tok.board_bytes, bytes(21))
        self.assertEqual(str(tok), EMPTY_9X9)

    def test_given_other_reserved_values_when_deserialized_then_ignored(self):
        token = "9x9_1_4x2_7x-3_AQ=="
        board = deserialize(token)
        self.assertEqual(board.turn, WHITE)
        self.assertEqual(board.get(0, 0), BLACK)
        # Re-serializing writes the sentinel back
        self.assertEqual(serialize(board).split("_")[2:4], ["-1x-1", "-1x-1"])

    def test_given_misshapen_reserved_fields_when_deserialized_then_tolerated(self):
        for token in ("9x9_0_foo_bar_AQ==", "9x9_0_-1-1_-1x-1_AQ==", "9x9_0__-1x-1_AQ=="):
            board = deserialize(token)
            self.assertEqual(board.get(0, 0), BLACK, token)
            self.assertEqual(board.stones(), {BLACK: 1, WHITE: 0}, token)
        self.assertEqual(StateToken.parse("9x9_0_foo_-1x-1_AQ==").reserved, ("foo", "", "-1", "-1"))

    def test_given_short_payload_when_deserialized_then_missing_cells_empty(self):
        board = deserialize("9x9_0_-1x-1_-1x-1_AQ==")
        self.assertEqual(board.stones(), {BLACK: 1, WHITE: 0})
        self.assertEqual(deserialize("3x3_0_-1x-1_-1x-1_"), Board.create(3, 3))

    def test_given_url_safe_payload_when_deserialized_then_same_as_standard(self):
        std = deserialize("3x3_0_-1x-1_-1x-1_+/8=")
        safe = deserialize("3x3_0_-1x-1_-1x-1_-_8=")
        self.assertEqual(std, safe)

    def test_given_malformed_tokens_when_deserialized_then_invalid_token(self):
        bad = [
            "",
            "garbage",
            "9x9_0_-1x-1_-1x-1",
            "9by9_0_-1x-1_-1x-1_AAAA",
            "axb_0_-1x-1_-1x-1_AAAA",
            "9x9_2_-1x-1_-1x-1_AAAA",
            "9x9_z_-1x-1_-1x-1_AAAA",
            "9x9_0_-1x-1_-1x-1_!!!!",
            "20x20_0_-1x-1_-1x-1_AAAA",
            "0x9_0_-1x-1_-1x-1_AAAA",
        ]
        for token in bad:
            with self.assertRaises(InvalidTokenError, msg=token):
                deserialize(token)
        # Still a ValueError for callers that only know the builtin
        with self.assertRaises(ValueError):
            deserialize("nope")

    def test_given_board_when_artifact_named_then_token_recoverable(self):
        board = Board.create(9, 9)
        board.set(4, 4, WHITE)
        name = artifact_name(board)
        self.assertTrue(name.endswith(".png"))
        self.assertEqual(token_from_artifact(name), serialize(board))
        self.assertEqual(token_from_artifact(EMPTY_9X9), EMPTY_9X9)
        self.assertEqual(artifact_name(board, ".txt"), serialize(board) + ".txt")


if __name__ == "__main__":
    unittest.main()
