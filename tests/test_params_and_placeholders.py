from __future__ import annotations

import unittest
from collections import OrderedDict

from mini_db.core.params import Named, Positional, bind_params
from mini_db.core.placeholders import NAMED, POSITIONAL, TEXT, tokenize


class BindParamsTests(unittest.TestCase):
    def test_none_and_empty_collections_are_positional(self) -> None:
        self.assertEqual(bind_params(None), Positional(()))
        self.assertEqual(bind_params([]), Positional(()))
        self.assertEqual(bind_params(()), Positional(()))
        self.assertEqual(bind_params({}), Positional(()))

    def test_bare_scalar_becomes_single_positional_value(self) -> None:
        self.assertEqual(bind_params(13), Positional((13,)))
        self.assertEqual(bind_params("abc"), Positional(("abc",)))
        self.assertEqual(bind_params(b"\x00\x01"), Positional((b"\x00\x01",)))
        self.assertEqual(bind_params(1.5), Positional((1.5,)))

    def test_sequences_keep_input_order(self) -> None:
        self.assertEqual(bind_params([3, "b", None]), Positional((3, "b", None)))
        self.assertEqual(bind_params((1, 2)), Positional((1, 2)))

    def test_mapping_keyed_zero_to_n_is_positional(self) -> None:
        self.assertEqual(bind_params({0: "a", 1: "b"}), Positional(("a", "b")))

    def test_mapping_with_out_of_order_int_keys_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            bind_params({1: "a", 0: "b"})

    def test_bool_keys_are_not_a_list(self) -> None:
        with self.assertRaises(ValueError):
            bind_params({False: "a"})

    def test_string_keys_are_named_and_colon_is_stripped(self) -> None:
        bound = bind_params(OrderedDict([(":id", 5), ("name", "x")]))
        self.assertIsInstance(bound, Named)
        self.assertEqual(bound.values, {"id": 5, "name": "x"})

    def test_mixed_keys_raise(self) -> None:
        with self.assertRaises(ValueError):
            bind_params({0: "a", "name": "b"})

    def test_already_bound_params_pass_through(self) -> None:
        positional = Positional((1,))
        named = Named({"a": 1})
        self.assertIs(bind_params(positional), positional)
        self.assertIs(bind_params(named), named)

    def test_len_reports_value_count(self) -> None:
        self.assertEqual(len(Positional((1, 2, 3))), 3)
        self.assertEqual(len(Named({"a": 1})), 1)
        self.assertEqual(len(Named()), 0)


class TokenizeTests(unittest.TestCase):
    def test_tokens_join_back_to_source(self) -> None:
        sql = "SELECT * FROM t WHERE a = ? AND b = :name -- trailing ?\n"
        self.assertEqual("".join(token.text for token in tokenize(sql)), sql)

    def test_positional_and_named_placeholders(self) -> None:
        tokens = [t for t in tokenize("a = ? AND b = :amount2 AND c = :amount") if t.is_placeholder]
        self.assertEqual([t.kind for t in tokens], [POSITIONAL, NAMED, NAMED])
        self.assertEqual([t.name for t in tokens], [None, "amount2", "amount"])

    def test_quoted_text_and_comments_are_not_placeholders(self) -> None:
        sql = (
            "SELECT '?', 'it''s :x', \"col?\", `a:b` /* :c ? */ FROM t "
            "WHERE x = ? -- :d"
        )
        placeholders = [t for t in tokenize(sql) if t.is_placeholder]
        self.assertEqual(len(placeholders), 1)
        self.assertEqual(placeholders[0].kind, POSITIONAL)

    def test_backslash_is_plain_character_in_standard_strings(self) -> None:
        tokens = tokenize("SELECT 'C:\\' AS p, ? AS v, 'x' AS w")
        self.assertEqual([t.kind for t in tokens], [TEXT, POSITIONAL, TEXT])
        self.assertEqual(tokens[0].text, "SELECT 'C:\\' AS p, ")

    def test_backslash_escaped_quote_stays_inside_string_when_enabled(self) -> None:
        placeholders = [
            t for t in tokenize(r"SELECT 'a\'?' , ?", backslash_escapes=True) if t.is_placeholder
        ]
        self.assertEqual(len(placeholders), 1)

    def test_escape_string_prefix_honors_backslash(self) -> None:
        placeholders = [t for t in tokenize(r"SELECT e'\' :x', :y") if t.is_placeholder]
        self.assertEqual([t.name for t in placeholders], ["y"])

    def test_double_colon_cast_is_text(self) -> None:
        tokens = tokenize("SELECT :value::int")
        self.assertEqual([t.kind for t in tokens], [TEXT, NAMED, TEXT])
        self.assertEqual(tokens[1].name, "value")
        self.assertEqual(tokens[2].text, "::int")

    def test_sql_without_placeholders_is_one_text_token(self) -> None:
        tokens = tokenize("SELECT 1")
        self.assertEqual(len(tokens), 1)
        self.assertFalse(tokens[0].is_placeholder)

    def test_empty_sql_has_no_tokens(self) -> None:
        self.assertEqual(tokenize(""), ())


if __name__ == "__main__":
    unittest.main()
