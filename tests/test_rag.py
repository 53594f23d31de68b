# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from fastapi.testclient import TestClient

from fitgate.api import app
from fitgate.rag.documents import get_documents, load_documents
from fitgate.rag.ranker import rank, tokenize

DOCS = [
    {"text": "Deadlift technique for a strong back", "id": 0},
    {"text": "Running builds endurance", "id": 1},
    {"text": "Back squat and front squat variations", "id": 2},
    {"text": "Stretch your back after a deadlift", "id": 3},
    {"text": "Back pain? See a physio", "id": 4},
    {"text": "back back back", "id": 5},
    {"text": "Rowing strengthens the upper back", "id": 6},
]


class TestRanker(unittest.TestCase):
    def test_empty_inputs(self) -> None:
        self.assertEqual(rank(DOCS, ""), [])
        self.assertEqual(rank(DOCS, "   \t "), [])
        self.assertEqual(rank([], "back"), [])

    def test_tokenize_dedupes_and_lowercases(self) -> None:
        self.assertEqual(tokenize("  Back  back DEADLIFT "), ["back", "deadlift"])

    def test_scores_count_distinct_tokens(self) -> None:
        results = rank(DOCS, "deadlift back")
        self.assertEqual([r["id"] for r in results[:2]], [0, 3])
        self.assertEqual(results[0]["score"], 2)
        # Repeated occurrences in the text still count once.
        self.assertEqual(next(r for r in rank(DOCS, "back") if r["id"] == 5)["score"], 1)

    def test_at_most_five_sorted_and_stable(self) -> None:
        results = rank(DOCS, "back deadlift")
        self.assertLessEqual(len(results), 5)
        scores = [r["score"] for r in results]
        self.assertTrue(all(s > 0 for s in scores))
        self.assertEqual(scores, sorted(scores, reverse=True))
        # Ties keep document order.
        self.assertEqual([r["id"] for r in results], [0, 3, 2, 4, 5])

    def test_substring_match_and_metadata_kept(self) -> None:
        results = rank([{"text": "Squatting", "source": "faq"}], "SQUAT")
        self.assertEqual(results, [{"text": "Squatting", "source": "faq", "score": 1}])

    def test_documents_not_mutated(self) -> None:
        rank(DOCS, "back")
        self.assertTrue(all("score" not in d for d in DOCS))


class TestLoadDocuments(unittest.TestCase):
    def test_malformed_json_is_empty(self) -> None:
        self.assertEqual(load_documents("[{not json"), [])
        self.assertEqual(load_documents(""), [])
        self.assertEqual(load_documents(None), [])

    def test_non_array_is_empty(self) -> None:
        self.assertEqual(load_documents('{"text": "x"}'), [])

    def test_entries_normalized(self) -> None:
        raw = '[{"text": "a", "tag": "t"}, "plain", 3, {"title": "no text"}]'
        self.assertEqual(
            load_documents(raw),
            [{"text": "a", "tag": "t"}, {"text": "plain"}, {"title": "no text", "text": ""}],
        )


class TestRagSearchRoute(unittest.TestCase):
    def setUp(self) -> None:
        app.dependency_overrides[get_documents] = lambda: DOCS
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.client.close()

    def test_missing_query_is_400(self) -> None:
        for body in ({}, {"query": ""}):
            resp = self.client.post("/rag/search", json=body)
            self.assertEqual(resp.status_code, 400)
            self.assertEqual(resp.json(), {"error": "query is required."})

    def test_search(self) -> None:
        resp = self.client.post("/rag/search", json={"query": "running"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"matches": [{"text": "Running builds endurance", "id": 1, "score": 1}]})

    def test_no_matches(self) -> None:
        resp = self.client.post("/rag/search", json={"query": "swimming"})
        self.assertEqual(resp.json(), {"matches": []})


if __name__ == "__main__":
    unittest.main()
