import json

import httpx
import pytest
from pydantic import ValidationError

from app.features.analyzers.schemas import (
    AnalyzerConfig,
    AnalyzerFailure,
    AnalyzerSuccess,
    WebAuditResults,
)
from app.features.analyzers.services import (
    AccessibilityClient,
    DesignAttachment,
    HtmlOrUrlRequest,
    LLMReviewClient,
    LLMReviewRequest,
    PerformanceClient,
    ValidationClient,
)


def client_for(client_cls, handler, **config):
    settings = {"name": client_cls.__name__, "base_url": "http://analyzer.test", "timeout_seconds": 1}
    settings.update(config)
    return client_cls(AnalyzerConfig(**settings), transport=httpx.MockTransport(handler))


class TestAnalyzerFailureContract:
    """Remote failures come back as AnalyzerFailure, never as exceptions"""

    @pytest.mark.asyncio
    async def test_error_status(self):
        client = client_for(AccessibilityClient, lambda request: httpx.Response(500), name="accessibility")

        result = await client.analyze(HtmlOrUrlRequest(html="<p></p>"))

        assert isinstance(result, AnalyzerFailure)
        assert result.analyzer == "accessibility"
        assert result.reason == "status 500"

    @pytest.mark.asyncio
    async def test_undecodable_body(self):
        client = client_for(ValidationClient, lambda request: httpx.Response(200, text="<html>"))

        result = await client.analyze(HtmlOrUrlRequest(html="<p></p>"))

        assert isinstance(result, AnalyzerFailure)
        assert result.reason == "malformed response"

    @pytest.mark.asyncio
    async def test_unexpected_shape(self):
        client = client_for(
            ValidationClient, lambda request: httpx.Response(200, json={"messages": "nope"})
        )

        result = await client.analyze(HtmlOrUrlRequest(html="<p></p>"))

        assert isinstance(result, AnalyzerFailure)

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        result = await client_for(PerformanceClient, handler).analyze("https://example.com")

        assert isinstance(result, AnalyzerFailure)
        assert result.reason == "timeout"

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        result = await client_for(PerformanceClient, handler).analyze("https://example.com")

        assert isinstance(result, AnalyzerFailure)
        assert result.reason.startswith("transport error")


class TestHtmlOrUrlRequest:
    """Accessibility and validation take exactly one of html or url"""

    def test_neither(self):
        with pytest.raises(ValueError):
            HtmlOrUrlRequest()

    def test_both(self):
        with pytest.raises(ValidationError):
            HtmlOrUrlRequest(html="<p></p>", url="https://example.com")


class TestAccessibilityClient:
    @pytest.mark.asyncio
    async def test_posts_html_and_decodes_violations(self):
        def handler(request):
            assert request.method == "POST"
            assert request.url.path == "/analyze"
            assert json.loads(request.content) == {"html": "<img src='a.png'>"}
            return httpx.Response(
                200,
                json={
                    "violations": [{"Id": "image-alt", "Nodes": [{"Impact": "critical"}]}],
                    "responsivenessResults": [{"Viewport": "375x667", "Overflow": False}],
                },
            )

        result = await client_for(AccessibilityClient, handler).analyze(
            HtmlOrUrlRequest(html="<img src='a.png'>")
        )

        assert isinstance(result, AnalyzerSuccess)
        assert result.payload.violations[0].id == "image-alt"
        assert result.payload.violations[0].nodes[0].impact == "critical"
        assert result.payload.responsiveness_results[0].viewport == "375x667"


class TestPerformanceClient:
    @pytest.mark.asyncio
    async def test_requests_all_categories_with_key(self):
        def handler(request):
            params = request.url.params
            assert params["url"] == "https://example.com"
            assert params["key"] == "secret"
            assert params.get_list("category") == [
                "performance",
                "accessibility",
                "best-practices",
                "seo",
            ]
            return httpx.Response(
                200,
                json={
                    "loadingExperience": {
                        "metrics": {"FIRST_CONTENTFUL_PAINT_MS": {"percentile": 1200, "category": "FAST"}},
                        "overall_category": "FAST",
                    },
                    "lighthouseResult": {
                        "categories": {"best-practices": {"score": 0.75}, "seo": {"score": None}}
                    },
                },
            )

        client = client_for(PerformanceClient, handler, api_key="secret")
        result = await client.analyze("https://example.com")

        assert isinstance(result, AnalyzerSuccess)
        categories = result.payload.lighthouse_result.categories
        assert categories.best_practices.score == 0.75
        assert categories.seo.score is None
        metric = result.payload.loading_experience.metrics["FIRST_CONTENTFUL_PAINT_MS"]
        assert metric.percentile == 1200

    @pytest.mark.asyncio
    async def test_key_is_optional(self):
        def handler(request):
            assert "key" not in request.url.params
            return httpx.Response(200, json={})

        result = await client_for(PerformanceClient, handler).analyze("https://example.com")

        assert isinstance(result, AnalyzerSuccess)


class TestValidationClient:
    @pytest.mark.asyncio
    async def test_posts_markup(self):
        def handler(request):
            assert request.method == "POST"
            assert request.url.params["out"] == "json"
            assert request.headers["content-type"] == "text/html; charset=utf-8"
            assert request.content == b"<p>hi</p>"
            return httpx.Response(
                200, json={"messages": [{"type": "error", "message": "Bad", "lastLine": 4}]}
            )

        result = await client_for(ValidationClient, handler).analyze(HtmlOrUrlRequest(html="<p>hi</p>"))

        assert isinstance(result, AnalyzerSuccess)
        assert result.payload.messages[0].last_line == 4

    @pytest.mark.asyncio
    async def test_gets_url(self):
        def handler(request):
            assert request.method == "GET"
            assert request.url.params["doc"] == "https://example.com"
            return httpx.Response(200, json={"messages": []})

        result = await client_for(ValidationClient, handler).analyze(
            HtmlOrUrlRequest(url="https://example.com")
        )

        assert isinstance(result, AnalyzerSuccess)
        assert result.payload.messages == []


class TestLLMReviewClient:
    @pytest.mark.asyncio
    async def test_sends_multipart_review_request(self):
        def handler(request):
            body = request.content
            assert request.url.path == "/analyze"
            assert request.headers["content-type"].startswith("multipart/form-data")
            assert b'name="html"' in body
            assert b'name="auditResults"' in body
            assert b'"axeCoreResult":null' in body
            assert b'name="specification"' in body
            assert b'name="designFile"; filename="mock.png"' in body
            assert b"\x89PNG" in body
            return httpx.Response(
                200,
                json={
                    "Executive Summary": "Close match.",
                    "Non-LLM Evaluations": {
                        "Accessibility Report": {
                            "Summary": "One issue.",
                            "Key Findings": [{"Issue": "Missing alt", "Recommended Fix": "Add alt"}],
                        }
                    },
                },
            )

        request = LLMReviewRequest(
            html="<p>hi</p>",
            specification="Hero must be blue.",
            design_file=DesignAttachment(filename="mock.png", content_type="image/png", data=b"\x89PNG"),
            audit_results=WebAuditResults(),
        )
        result = await client_for(LLMReviewClient, handler).analyze(request)

        assert isinstance(result, AnalyzerSuccess)
        assert result.payload.executive_summary == "Close match."
        report = result.payload.non_llm_evaluations.accessibility_report
        assert report.key_findings[0].recommended_fix == "Add alt"

    @pytest.mark.asyncio
    async def test_optional_parts_are_omitted(self):
        def handler(request):
            assert request.headers["content-type"].startswith("multipart/form-data")
            assert b'name="specification"' not in request.content
            assert b'name="designFile"' not in request.content
            return httpx.Response(200, json={})

        request = LLMReviewRequest(html="<p>hi</p>", audit_results=WebAuditResults())
        result = await client_for(LLMReviewClient, handler).analyze(request)

        assert isinstance(result, AnalyzerSuccess)
