import unittest

from fastapi.testclient import TestClient

from lexer import app


class TestLexerService(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)

    def test_health_check(self):
        response = self.client.get("/healthz")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"ok": True})

    def test_lex_ok(self):
        response = self.client.post("/lex", json={"source": "  x := 5;\n  "})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["ok"])
        self.assertTrue(body["data"]["success"])
        self.assertEqual(body["data"]["errors"], [])
        self.assertEqual(body["data"]["tokens"], [
            {"type": 10, "value": "x"},
            {"type": 20, "value": ":="},
            {"type": 11, "value": "5"},
            {"type": 23, "value": ";"},
            {"type": 25, "value": "EOF"},
        ])

    def test_lex_errors_are_not_fatal(self):
        response = self.client.post("/lex", json={"source": "a # b"})
        body = response.json()
        self.assertTrue(body["ok"])
        self.assertFalse(body["data"]["success"])
        self.assertEqual(body["data"]["errors"], [
            {"line": 1, "code": "E_LEX_BAD_CHAR", "msg": "Line 1: Invalid character '#'"},
        ])
        self.assertEqual([t["value"] for t in body["data"]["tokens"]], ["a", "b", "EOF"])

    def test_missing_source_rejected(self):
        response = self.client.post("/lex", json={})
        self.assertEqual(response.status_code, 422)
