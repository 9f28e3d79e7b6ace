import math
import unittest
from functools import cmp_to_key

from application.services.search_server import RELEVANCE_EPSILON, SearchServer, _compare_documents
from domain.entities import Document, DocumentStatus
from domain.errors import InvalidArgumentError, InvalidWordError, OutOfRangeError
from infrastructure.repositories import InMemoryDocumentRepository


def build_server() -> SearchServer:
    server = SearchServer("и в на")
    server.add_document(0, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "ухоженный пёс выразительные глаза", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    server.add_document(3, "ухоженный скворец евгений", DocumentStatus.BANNED, [9])
    return server


class TestConstruction(unittest.TestCase):
    def test_stop_words_from_string_and_collection(self):
        self.assertEqual(SearchServer("и в  на").stop_words, frozenset({"и", "в", "на"}))
        self.assertEqual(SearchServer(["и", "", "в", "и"]).stop_words, frozenset({"и", "в"}))
        self.assertEqual(SearchServer().stop_words, frozenset())

    def test_server_owns_its_document_store(self):
        with self.assertRaises(TypeError):
            SearchServer(document_repository=InMemoryDocumentRepository())
        server = SearchServer()
        self.assertEqual(server.get_document_count(), 0)
        server.add_document(0, "кот", DocumentStatus.ACTUAL, [])
        server.add_document(1, "пёс", DocumentStatus.ACTUAL, [])
        self.assertEqual(server.get_document_count(), 2)
        self.assertAlmostEqual(server.find_top_documents("кот")[0].relevance, math.log(2))

    def test_stop_word_with_control_character_is_rejected(self):
        with self.assertRaises(InvalidWordError):
            SearchServer(["и", "в\tна"])
        with self.assertRaises(InvalidArgumentError):
            SearchServer(["ско\x12рец"])


class TestAddDocument(unittest.TestCase):
    def test_count_and_insertion_order(self):
        server = SearchServer()
        for document_id in (5, 2, 9):
            server.add_document(document_id, "кот", DocumentStatus.ACTUAL, [])
        self.assertEqual(server.get_document_count(), 3)
        self.assertEqual(len(server), 3)
        self.assertEqual([server.get_document_id(index) for index in range(3)], [5, 2, 9])

    def test_failed_additions_leave_server_unchanged(self):
        server = SearchServer()
        server.add_document(1, "кот", DocumentStatus.ACTUAL, [1])
        with self.assertRaises(InvalidArgumentError):
            server.add_document(1, "пёс", DocumentStatus.ACTUAL, [1])
        with self.assertRaises(InvalidArgumentError):
            server.add_document(-1, "пёс", DocumentStatus.ACTUAL, [1])
        with self.assertRaises(InvalidArgumentError):
            server.add_document(2, "пёс ско\x12рец", DocumentStatus.ACTUAL, [1])
        self.assertEqual(server.get_document_count(), 1)
        self.assertEqual(server.find_top_documents("пёс"), [])
        # id 2 is still free after the failed attempt
        server.add_document(2, "пёс", DocumentStatus.ACTUAL, [1])
        self.assertEqual(server.get_document_id(1), 2)

    def test_document_of_stop_words_only_is_stored_without_words(self):
        server = SearchServer("и в")
        server.add_document(0, "и в и", DocumentStatus.ACTUAL, [3])
        self.assertEqual(server.get_document_count(), 1)
        self.assertEqual(server.match_document("и в", 0), ([], DocumentStatus.ACTUAL))

    def test_average_rating_truncates_toward_zero(self):
        self.assertEqual(SearchServer.compute_average_rating([8, -3]), 2)
        self.assertEqual(SearchServer.compute_average_rating([7, 2, 7]), 5)
        self.assertEqual(SearchServer.compute_average_rating([-7, 2]), -2)
        self.assertEqual(SearchServer.compute_average_rating([]), 0)

    def test_document_id_out_of_range(self):
        server = build_server()
        with self.assertRaises(OutOfRangeError):
            server.get_document_id(4)
        with self.assertRaises(OutOfRangeError):
            server.get_document_id(-1)


class TestFindTopDocuments(unittest.TestCase):
    def test_ranking_by_relevance_then_rating(self):
        results = build_server().find_top_documents("пушистый ухоженный кот")
        self.assertEqual([document.id for document in results], [1, 0, 2])
        self.assertAlmostEqual(results[0].relevance, 0.5 * math.log(4) + 0.25 * math.log(2))
        self.assertAlmostEqual(results[1].relevance, 0.25 * math.log(2))
        self.assertEqual([document.rating for document in results], [5, 2, -1])

    def test_status_filter(self):
        results = build_server().find_top_documents("пушистый ухоженный кот", DocumentStatus.BANNED)
        self.assertEqual(len(results), 1)
        self.assertEqual(results[0].id, 3)
        self.assertAlmostEqual(results[0].relevance, math.log(2) / 3)

    def test_predicate_filter(self):
        results = build_server().find_top_documents(
            "пушистый ухоженный кот", lambda document_id, status, rating: document_id % 2 == 0
        )
        self.assertEqual([document.id for document in results], [0, 2])

    def test_minus_word_excludes_documents(self):
        server = build_server()
        self.assertEqual(server.find_top_documents("пушистый -кот"), [])
        results = server.find_top_documents("ухоженный кот -пёс")
        self.assertEqual([document.id for document in results], [1, 0])

    def test_minus_word_excludes_regardless_of_predicate(self):
        results = build_server().find_top_documents("кот -хвост", lambda *_: True)
        self.assertEqual([document.id for document in results], [0])

    def test_stop_words_only_query_returns_nothing(self):
        self.assertEqual(build_server().find_top_documents("и в на"), [])

    def test_unknown_word_contributes_nothing(self):
        self.assertEqual(build_server().find_top_documents("жираф"), [])

    def test_results_capped_and_sorted(self):
        server = SearchServer()
        for document_id in range(7):
            server.add_document(document_id, "кот", DocumentStatus.ACTUAL, [document_id])
        results = server.find_top_documents("кот")
        self.assertEqual(len(results), 5)
        self.assertEqual([document.rating for document in results], [6, 5, 4, 3, 2])

    def test_relevance_within_epsilon_is_a_tie_broken_by_rating(self):
        higher = math.nextafter(0.5, 1.0)
        self.assertNotEqual(higher, 0.5)
        self.assertLess(higher - 0.5, RELEVANCE_EPSILON)
        documents = [Document(1, higher, 1), Document(2, 0.5, 9)]
        ordered = sorted(documents, key=cmp_to_key(_compare_documents))
        self.assertEqual([document.id for document in ordered], [2, 1])

    def test_relevance_gap_above_epsilon_wins_over_rating(self):
        higher = 0.5 + 4 * RELEVANCE_EPSILON
        documents = [Document(2, 0.5, 9), Document(1, higher, 1)]
        ordered = sorted(documents, key=cmp_to_key(_compare_documents))
        self.assertEqual([document.id for document in ordered], [1, 2])

    def test_custom_result_limit(self):
        server = SearchServer(max_result_document_count=2)
        for document_id in range(4):
            server.add_document(document_id, f"кот слово{document_id}", DocumentStatus.ACTUAL, [])
        self.assertEqual(len(server.find_top_documents("кот")), 2)

    def test_relevance_is_non_increasing(self):
        server = SearchServer("и")
        texts = ["кот", "кот пёс", "кот пёс попугай", "пёс", "попугай и кот кот", "рыба"]
        for document_id, text in enumerate(texts):
            server.add_document(document_id, text, DocumentStatus.ACTUAL, [document_id])
        results = server.find_top_documents("кот пёс попугай")
        relevances = [document.relevance for document in results]
        self.assertEqual(relevances, sorted(relevances, reverse=True))

    def test_invalid_queries(self):
        server = build_server()
        for query in ("кот --пёс", "кот -", "ско\x12рец", "кот\tпёс", "--"):
            with self.subTest(query=query):
                with self.assertRaises(InvalidArgumentError):
                    server.find_top_documents(query)

    def test_document_str(self):
        self.assertEqual(str(Document(1, 0.5, 2)), "{ document_id = 1, relevance = 0.5, rating = 2 }")


class TestMatchDocument(unittest.TestCase):
    def test_matched_words_and_status(self):
        server = build_server()
        self.assertEqual(server.match_document("пушистый кот жираф", 1), (["кот", "пушистый"], DocumentStatus.ACTUAL))
        self.assertEqual(server.match_document("ухоженный", 3), (["ухоженный"], DocumentStatus.BANNED))

    def test_minus_word_voids_match(self):
        server = build_server()
        self.assertEqual(server.match_document("пушистый -хвост", 1), ([], DocumentStatus.ACTUAL))
        self.assertEqual(server.match_document("модный -хвост", 0), (["модный"], DocumentStatus.ACTUAL))

    def test_stop_words_are_ignored(self):
        self.assertEqual(build_server().match_document("и кот", 0), (["кот"], DocumentStatus.ACTUAL))

    def test_invalid_query_and_unknown_document(self):
        server = build_server()
        with self.assertRaises(InvalidArgumentError):
            server.match_document("кот -", 0)
        with self.assertRaises(OutOfRangeError):
            server.match_document("кот", 99)


if __name__ == "__main__":
    unittest.main()
