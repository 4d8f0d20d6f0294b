import unittest

from game import (
    BLACK,
    WHITE,
    InvalidMoveError,
    MoveId,
    action_id,
    decode_move,
    encode_move,
    parse_action,
)


class TestMoveIdentifier(unittest.TestCase):
    def test_given_pending_row_when_encoding_then_row_segment_omitted(self):
        self.assertEqual(encode_move(3, -1, BLACK), "b3")
        self.assertEqual(encode_move(18, -1, WHITE), "w18")

    def test_given_row_when_encoding_then_colon_separated(self):
        self.assertEqual(encode_move(3, 15, WHITE), "w3:15")
        self.assertEqual(encode_move(0, 0, BLACK), "b0:0")

    def test_given_all_coordinates_when_round_trip_then_identical(self):
        for color in (BLACK, WHITE):
            for column in range(19):
                for row in range(-1, 19):
                    move = decode_move(encode_move(column, row, color))
                    self.assertEqual(move, MoveId(column=column, row=row, color=color))
                    self.assertEqual(move.row_pending, row == -1)

    def test_given_malformed_ids_when_decoding_then_invalid_move(self):
        for text in ["", "x3", "b", "bx", "b3:", "b3:y", "b-1", "w2:-4", "B3"]:
            with self.assertRaises(InvalidMoveError, msg=text):
                decode_move(text)

    def test_given_non_canonical_numbers_when_decoding_then_invalid_move(self):
        for text in ["b1_0", "b1_0:2", "b 3", "b+3", "w3:+1", "b03", "w3:07", "b\uff13"]:
            with self.assertRaises(InvalidMoveError, msg=text):
                decode_move(text)
        self.assertEqual(decode_move("w0:0").column, 0)
        with self.assertRaises(InvalidMoveError):
            parse_action("m_b1_0:2")


class TestButtonActions(unittest.TestCase):
    def test_given_kinds_when_building_ids_then_wire_format(self):
        self.assertEqual(action_id("column", BLACK, 4), "m_b4")
        self.assertEqual(action_id("row", WHITE, 4, 7), "m_w4:7")
        self.assertEqual(action_id("pass", WHITE), "m_pass_w")
        self.assertEqual(action_id("resign", BLACK), "m_resign_b")
        self.assertEqual(action_id("back", BLACK), "mp_b")
        with self.assertRaises(ValueError):
            action_id("jump", BLACK)

    def test_given_ids_when_parsing_then_actions(self):
        a = parse_action("m_b4")
        self.assertEqual((a.kind, a.color, a.move), ("column", BLACK, MoveId(4, -1, BLACK)))
        a = parse_action("mc_w2")
        self.assertEqual((a.kind, a.color), ("column", WHITE))
        a = parse_action("m_w4:7")
        self.assertEqual((a.kind, a.move.column, a.move.row), ("row", 4, 7))
        a = parse_action("m_pass_w")
        self.assertEqual((a.kind, a.color, a.move), ("pass", WHITE, None))
        a = parse_action("m_resign_b")
        self.assertEqual((a.kind, a.color), ("resign", BLACK))
        a = parse_action("mp_w")
        self.assertEqual((a.kind, a.color), ("back", WHITE))

    def test_given_built_ids_when_parsed_then_round_trip(self):
        for kind, args in [("column", (5,)), ("row", (5, 11)), ("pass", ()), ("resign", ()), ("back", ())]:
            action = parse_action(action_id(kind, WHITE, *args))
            self.assertEqual(action.kind, kind)
            self.assertEqual(action.color, WHITE)

    def test_given_unknown_ids_when_parsing_then_invalid_move(self):
        for custom_id in ["", "m", "m_", "zz_b3", "mp_x", "m_pass_x", "m_pass", "m_resign_", "m_q3"]:
            with self.assertRaises(InvalidMoveError, msg=custom_id):
                parse_action(custom_id)


if __name__ == "__main__":
    unittest.main()
