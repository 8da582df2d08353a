import unittest

from fastapi.testclient import TestClient

from careercraft.main import app
from careercraft.schemas.resume import ResumeSections
from careercraft.services.resume_scoring import (
    analyze_resume,
    calc_match_score,
    extract_keywords,
    get_score_verdict,
    normalize_score,
)


class AnalyzeResumeTests(unittest.TestCase):
    def test_complete_resume(self):
        analysis = analyze_resume(
            ResumeSections(
                summary="Led teams and built platforms",
                experience="Optimized pipelines, reducing costs by 20%",
                education="BSc Computer Science",
                skills="Python, SQL",
            )
        )
        # 70 for sections, 3 verbs * 4, 10 for metrics.
        self.assertEqual(analysis.score, 92)
        self.assertIn("Uses strong action verbs", analysis.pros)
        self.assertIn("Includes quantifiable achievements", analysis.pros)
        self.assertEqual(analysis.cons, [])

    def test_empty_resume(self):
        analysis = analyze_resume(ResumeSections())
        self.assertEqual(analysis.score, 0)
        self.assertEqual(len(analysis.cons), 5)
        self.assertEqual(len(analysis.improvements), 6)

    def test_half_points_round_up(self):
        self.assertEqual(analyze_resume(ResumeSections(summary="hello world")).score, 18)


class MatchScoreTests(unittest.TestCase):
    def test_keyword_coverage(self):
        result = calc_match_score(
            "Python developer with SQL and Docker experience, improved latency by 30%",
            "Python SQL Kubernetes Python",
        )
        self.assertEqual(result.score, 80)
        self.assertEqual(result.verdict, "Good match")
        self.assertEqual(result.pros, ["Contains keyword: python", "Contains keyword: sql"])
        self.assertEqual(result.missing, ["kubernetes"])
        self.assertEqual(result.cons, [])
        self.assertEqual(result.suggestions, ["Add missing skills and keywords highlighted below."])

    def test_brief_resume_against_long_jd(self):
        result = calc_match_score("cook", "python engineer needed for python backend platform team")
        self.assertIn("Low keyword coverage vs JD", result.cons)
        self.assertIn("Resume content seems brief vs JD", result.cons)
        self.assertIn("Quantify achievements to strengthen impact.", result.suggestions)
        self.assertEqual(result.verdict, "Not recommended")

    def test_keywords_skip_stop_words_and_short_tokens(self):
        tokens = "the go api and api for you python".split()
        self.assertEqual(extract_keywords(tokens), ["api", "python"])


class ScoreUtilsTests(unittest.TestCase):
    def test_normalize_score(self):
        self.assertEqual(normalize_score(None), 0)
        self.assertEqual(normalize_score(7.5), 75)
        self.assertEqual(normalize_score(10), 100)
        self.assertEqual(normalize_score(85.4), 85)

    def test_verdict_thresholds(self):
        self.assertEqual(get_score_verdict(70), "Good match")
        self.assertEqual(get_score_verdict(69), "Partial match")
        self.assertEqual(get_score_verdict(30), "Partial match")
        self.assertEqual(get_score_verdict(29), "Not recommended")


class ResumeApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_analyze_endpoint(self):
        response = self.client.post("/api/resume/analyze", json={"summary": "hello world"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["score"], 18)

    def test_match_endpoint(self):
        response = self.client.post(
            "/api/jd/match",
            json={"resumeText": "python sql", "jdText": "python sql"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["score"], 100)
        self.assertEqual(body["missing"], [])

    def test_verdict_endpoint(self):
        response = self.client.get("/api/resume/verdict", params={"score": 4})
        self.assertEqual(response.json(), {"score": 40, "verdict": "Partial match"})


if __name__ == "__main__":
    unittest.main()
