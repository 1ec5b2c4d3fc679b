import json
from types import SimpleNamespace
from unittest.mock import Mock

from django.test import SimpleTestCase, override_settings
from openai import OpenAIError

from textgen import FallbackTextGenerator, OpenAITextGenerator, get_text_generator
from textgen.fallback_engine import severity_for_case_count
from textgen.openai_engine import parse_question
from textgen.templates import FALLBACK_PREVENTIVE_MEASURES


def _completion(content):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


def _engine_returning(content):
    client = Mock()
    client.chat.completions.create.return_value = _completion(content)
    return OpenAITextGenerator(model="test-model", api_key="sk-test", client=client), client


def _engine_raising(exc):
    client = Mock()
    client.chat.completions.create.side_effect = exc
    return OpenAITextGenerator(model="test-model", api_key="sk-test", client=client), client


def _question(**overrides):
    q = {
        "question": "How is dengue transmitted?",
        "options": ["Mosquito bite", "Water", "Air", "Touch"],
        "correctAnswer": 0,
        "explanation": "Aedes mosquitoes carry the virus.",
        "difficulty": "easy",
        "points": 10,
    }
    q.update(overrides)
    return q


class SeverityRuleTests(SimpleTestCase):
    def test_thresholds(self):
        self.assertEqual(severity_for_case_count(60), "high")
        self.assertEqual(severity_for_case_count(51), "high")
        self.assertEqual(severity_for_case_count(50), "medium")
        self.assertEqual(severity_for_case_count(30), "medium")
        self.assertEqual(severity_for_case_count(20), "low")
        self.assertEqual(severity_for_case_count(5), "low")


class FallbackTextGeneratorTests(SimpleTestCase):
    def test_alert_draft_is_templated(self):
        draft = FallbackTextGenerator().draft_alert("Cholera", 30, "District-B", ["Vomiting"])

        self.assertIn("Cholera", draft.message)
        self.assertIn("District-B", draft.message)
        self.assertIn("30", draft.message)
        self.assertEqual(draft.preventive_measures, list(FALLBACK_PREVENTIVE_MEASURES))
        self.assertEqual(len(draft.preventive_measures), 4)
        self.assertEqual(draft.severity, "medium")
        self.assertEqual(draft.engine, "fallback")

    def test_no_quiz_questions(self):
        self.assertEqual(
            FallbackTextGenerator().draft_quiz_questions("Dengue", "desc", [], []),
            [],
        )


class OpenAIAlertDraftTests(SimpleTestCase):
    def test_parses_model_response(self):
        engine, client = _engine_returning(json.dumps({
            "message": "Dengue is spreading. Use nets.",
            "preventiveMeasures": ["Use nets", "Remove standing water"],
            "severity": "High",
        }))

        draft = engine.draft_alert("Dengue", 12, "District-A", ["Fever", "Rash"])

        self.assertEqual(draft.message, "Dengue is spreading. Use nets.")
        self.assertEqual(draft.preventive_measures, ["Use nets", "Remove standing water"])
        self.assertEqual(draft.severity, "high")
        self.assertEqual(draft.engine, "openai")

        kwargs = client.chat.completions.create.call_args.kwargs
        self.assertEqual(kwargs["model"], "test-model")
        self.assertEqual(kwargs["response_format"], {"type": "json_object"})
        self.assertIn("Fever, Rash", kwargs["messages"][1]["content"])

    def test_api_error_falls_back(self):
        engine, _ = _engine_raising(OpenAIError("service unavailable"))

        draft = engine.draft_alert("Dengue", 60, "District-A", [])

        self.assertTrue(draft.message)
        self.assertEqual(len(draft.preventive_measures), 4)
        self.assertEqual(draft.severity, "high")
        self.assertEqual(draft.engine, "fallback")

    def test_network_style_error_falls_back(self):
        engine, _ = _engine_raising(ValueError("connection reset"))

        draft = engine.draft_alert("Dengue", 5, "District-A", [])

        self.assertEqual(draft.severity, "low")
        self.assertEqual(draft.engine, "fallback")

    def test_malformed_json_falls_back(self):
        engine, _ = _engine_returning("this is not json")

        draft = engine.draft_alert("Malaria", 30, "District-C", [])

        self.assertEqual(draft.engine, "fallback")
        self.assertEqual(draft.severity, "medium")

    def test_non_object_json_falls_back(self):
        engine, _ = _engine_returning(json.dumps(["a", "b"]))

        draft = engine.draft_alert("Malaria", 30, "District-C", [])

        self.assertEqual(draft.engine, "fallback")

    def test_partial_response_gets_defaults(self):
        engine, _ = _engine_returning(json.dumps({}))

        draft = engine.draft_alert("Typhoid", 14, "District-D", [])

        self.assertEqual(draft.message, "Typhoid outbreak detected in District-D. 14 cases reported.")
        self.assertEqual(draft.preventive_measures, list(FALLBACK_PREVENTIVE_MEASURES))
        self.assertEqual(draft.severity, "medium")

    def test_unknown_severity_uses_case_count_rule(self):
        engine, _ = _engine_returning(json.dumps({
            "message": "Alert",
            "preventiveMeasures": ["Boil water"],
            "severity": "catastrophic",
        }))

        draft = engine.draft_alert("Cholera", 55, "District-E", [])

        self.assertEqual(draft.severity, "high")


class OpenAIQuizDraftTests(SimpleTestCase):
    def test_keeps_valid_questions_and_drops_malformed(self):
        engine, _ = _engine_returning(json.dumps({
            "questions": [
                _question(),
                _question(options=["only", "three", "options"]),
                _question(correctAnswer=7),
                _question(question="   "),
                _question(difficulty="hard", points=None),
            ]
        }))

        drafts = engine.draft_quiz_questions("Dengue", "desc", ["Fever"], ["Nets"])

        self.assertEqual(len(drafts), 2)
        self.assertEqual(drafts[0].correct_answer, 0)
        self.assertEqual(drafts[1].difficulty, "hard")
        self.assertEqual(drafts[1].points, 30)

    def test_caps_at_five_questions(self):
        engine, _ = _engine_returning(json.dumps({"questions": [_question() for _ in range(8)]}))

        drafts = engine.draft_quiz_questions("Dengue", "desc", [], [])

        self.assertEqual(len(drafts), 5)

    def test_failure_returns_empty_list(self):
        engine, _ = _engine_raising(OpenAIError("quota exceeded"))

        self.assertEqual(engine.draft_quiz_questions("Dengue", "desc", [], []), [])

    def test_questions_not_a_list_returns_empty_list(self):
        engine, _ = _engine_returning(json.dumps({"questions": "none"}))

        self.assertEqual(engine.draft_quiz_questions("Dengue", "desc", [], []), [])


class ParseQuestionTests(SimpleTestCase):
    def test_unknown_difficulty_defaults_to_easy(self):
        draft = parse_question(_question(difficulty="impossible", points="abc"))

        self.assertEqual(draft.difficulty, "easy")
        self.assertEqual(draft.points, 10)

    def test_string_answer_index_is_accepted(self):
        self.assertEqual(parse_question(_question(correctAnswer="2")).correct_answer, 2)

    def test_non_dict_is_rejected(self):
        self.assertIsNone(parse_question("What is dengue?"))


class FactoryTests(SimpleTestCase):
    @override_settings(TEXTGEN_ENGINE="openai", OPENAI_API_KEY="")
    def test_no_key_means_fallback(self):
        self.assertIsInstance(get_text_generator(), FallbackTextGenerator)

    @override_settings(TEXTGEN_ENGINE="fallback", OPENAI_API_KEY="sk-test")
    def test_explicit_fallback(self):
        self.assertIsInstance(get_text_generator(), FallbackTextGenerator)

    @override_settings(TEXTGEN_ENGINE="OpenAI", OPENAI_API_KEY="sk-test", OPENAI_MODEL="m1")
    def test_openai_engine_when_configured(self):
        generator = get_text_generator()

        self.assertIsInstance(generator, OpenAITextGenerator)
        self.assertEqual(generator.model, "m1")
