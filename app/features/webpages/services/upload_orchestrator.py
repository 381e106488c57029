import asyncio
import mimetypes
from dataclasses import dataclass
from typing import Awaitable, Dict, List, Optional, Union
from urllib.parse import urlparse

from fastapi import HTTPException, status

from app.features.analyzers.schemas.audit import WebAuditResults
from app.features.analyzers.schemas.axe_core import AxeCoreResponse
from app.features.analyzers.schemas.llm import LLMResponse
from app.features.analyzers.schemas.nu_validator import NuValidatorResponse
from app.features.analyzers.schemas.page_speed import PageSpeedResponse
from app.features.analyzers.schemas.result import AnalyzerFailure, AnalyzerResult, AnalyzerSuccess
from app.features.analyzers.services.accessibility import AccessibilityClient, HtmlOrUrlRequest
from app.features.analyzers.services.llm_review import (
    DesignAttachment,
    LLMReviewClient,
    LLMReviewRequest,
)
from app.features.analyzers.services.performance import PerformanceClient
from app.features.analyzers.services.validation import ValidationClient
from app.features.auth.services.user_service import UserService
from app.features.webpages.models.webpage import Webpage
from app.features.webpages.models.webpage_analysis_result import WebpageAnalysisResult
from app.features.webpages.schemas.webpage import UploadRequest
from app.features.webpages.services.aggregate_store import AggregateStore
from app.features.webpages.services.content_resolver import ContentResolver
from app.features.webpages.services.specification import (
    SpecificationExtractionError,
    extract_specification_text_async,
)
from app.features.webpages.services.upload_validation import validate_upload_request
from app.platform.config import settings
from app.platform.logger import get_logger
from app.platform.storage.file_store import FileStore

logger = get_logger(__name__)

ACCESSIBILITY = "accessibility"
PERFORMANCE = "performance"
VALIDATION = "validation"


@dataclass
class StoredFileIds:
    html_content_id: str
    design_file_id: Optional[str] = None
    specification_file_id: Optional[str] = None

    def all(self) -> List[str]:
        return [
            file_id
            for file_id in (self.html_content_id, self.design_file_id, self.specification_file_id)
            if file_id
        ]


@dataclass
class FanOutResult:
    files: StoredFileIds
    accessibility: Union[AnalyzerSuccess[AxeCoreResponse], AnalyzerFailure]
    performance: Union[AnalyzerSuccess[PageSpeedResponse], AnalyzerFailure]
    validation: Union[AnalyzerSuccess[NuValidatorResponse], AnalyzerFailure]

    def audit_results(self) -> WebAuditResults:
        axe: Optional[AxeCoreResponse] = _payload(self.accessibility)
        nu: Optional[NuValidatorResponse] = _payload(self.validation)
        return WebAuditResults(
            axe_core_result=axe.violations if axe else None,
            page_speed_result=_payload(self.performance),
            nu_validator_result=nu.messages if nu else None,
            responsiveness_result=axe.responsiveness_results if axe else None,
        )


def _payload(result: AnalyzerResult):
    return result.payload if isinstance(result, AnalyzerSuccess) else None


class UploadOrchestrator:
    """
    Runs one upload end to end:

    1. validate the form (no side effects)
    2. resolve the email to a user
    3. resolve the HTML from the file or URL
    4. concurrently store the files and run the accessibility, performance
       and validation analyzers, then wait for all of them
    5. run the LLM review with the merged audit results
    6. commit the webpage and its analysis result together

    Analyzer failures only set error flags on the stored result. Validation,
    unknown users and unreachable URLs are rejected with HTTPException; any
    other exception (file store, database) propagates.
    """

    def __init__(
        self,
        *,
        user_service: UserService,
        file_store: FileStore,
        aggregate_store: AggregateStore,
        content_resolver: ContentResolver,
        accessibility: AccessibilityClient,
        performance: PerformanceClient,
        validation: ValidationClient,
        llm_review: LLMReviewClient,
        fan_out_timeout: Optional[float] = None,
    ):
        self.user_service = user_service
        self.file_store = file_store
        self.aggregate_store = aggregate_store
        self.content_resolver = content_resolver
        self.accessibility = accessibility
        self.performance = performance
        self.validation = validation
        self.llm_review = llm_review
        self.fan_out_timeout = fan_out_timeout or settings.ANALYSIS_FANOUT_TIMEOUT_SECONDS

    async def upload(self, request: UploadRequest) -> str:
        url = validate_upload_request(request)

        user_id = await self.user_service.get_user_id_by_email(request.email)
        # the analyzers and LLM call can take minutes; do not hold a connection meanwhile
        await self.user_service.end_read()
        if user_id is None:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Please Sign up")

        html = await self.content_resolver.resolve(html_file=request.html_file, url=url)

        fan_out = await self._fan_out(request, html, url)

        audit_results = fan_out.audit_results()

        specification = await self._specification_text(request)
        llm_result = await self.llm_review.analyze(
            LLMReviewRequest(
                html=html,
                specification=specification,
                design_file=self._design_attachment(request),
                audit_results=audit_results,
            )
        )
        llm_response: Optional[LLMResponse] = _payload(llm_result)

        webpage = Webpage(
            user_id=user_id,
            html_content_id=fan_out.files.html_content_id,
            url=url,
            file_name=request.html_file.filename if request.html_file else None,
            name=request.name,
            design_file_id=fan_out.files.design_file_id,
            specification_file_id=fan_out.files.specification_file_id,
        )
        analysis_result = WebpageAnalysisResult(
            llm_response=llm_response.model_dump(mode="json", by_alias=True)
            if llm_response
            else None,
            web_audit_results=audit_results.model_dump(mode="json", by_alias=True),
            axe_core_error=isinstance(fan_out.accessibility, AnalyzerFailure),
            nu_validator_error=isinstance(fan_out.validation, AnalyzerFailure),
            page_speed_error=isinstance(fan_out.performance, AnalyzerFailure),
            llm_error=isinstance(llm_result, AnalyzerFailure),
            # responsiveness metrics come from the accessibility service
            responsiveness_error=isinstance(fan_out.accessibility, AnalyzerFailure),
        )

        try:
            webpage_id = await self.aggregate_store.commit(webpage, analysis_result)
        except Exception:
            await self._discard_files(fan_out.files.all())
            raise

        logger.info(
            f"Upload {webpage_id} stored for user {user_id}: "
            f"accessibility_error={analysis_result.axe_core_error}, "
            f"performance_error={analysis_result.page_speed_error}, "
            f"validation_error={analysis_result.nu_validator_error}, "
            f"llm_error={analysis_result.llm_error}"
        )
        return webpage_id

    async def _fan_out(self, request: UploadRequest, html: str, url: Optional[str]) -> FanOutResult:
        """
        Store the files and run the three independent analyzers concurrently.

        File-store failures are fatal and re-raised once everything has settled.
        Analyzers still running after fan_out_timeout are cancelled and count
        as failures.
        """
        html_bytes = request.html_file.data if request.html_file else html.encode("utf-8")
        html_name = request.html_file.filename if request.html_file else _html_name_for(url)

        storage = asyncio.gather(
            self.file_store.put(html_bytes, html_name),
            self._put_optional(request.design_file),
            self._put_optional(request.specification_file),
            return_exceptions=True,
        )

        target = HtmlOrUrlRequest(url=url) if url else HtmlOrUrlRequest(html=html)
        analyzer_calls: Dict[str, Awaitable[AnalyzerResult]] = {
            ACCESSIBILITY: self.accessibility.analyze(target),
            VALIDATION: self.validation.analyze(target),
        }
        if url:
            analyzer_calls[PERFORMANCE] = self.performance.analyze(url)

        tasks = {name: asyncio.ensure_future(call) for name, call in analyzer_calls.items()}
        try:
            _, pending = await asyncio.wait(tasks.values(), timeout=self.fan_out_timeout)
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.wait(pending)

            stored = await storage
        finally:
            if not storage.done():
                storage.cancel()
            for task in tasks.values():
                if not task.done():
                    task.cancel()

        results: Dict[str, AnalyzerResult] = {}
        for name, task in tasks.items():
            if task.cancelled() or not task.done():
                logger.error(f"[{name}] did not finish within {self.fan_out_timeout}s")
                results[name] = AnalyzerFailure(analyzer=name, reason="timeout")
            elif task.exception() is not None:
                logger.error(f"[{name}] failed: {task.exception()}")
                results[name] = AnalyzerFailure(analyzer=name, reason=str(task.exception()))
            else:
                results[name] = task.result()

        if PERFORMANCE not in results:
            results[PERFORMANCE] = AnalyzerFailure(
                analyzer=PERFORMANCE, reason="performance analysis requires a URL"
            )

        errors = [item for item in stored if isinstance(item, BaseException)]
        if errors:
            await self._discard_files([item for item in stored if isinstance(item, str)])
            raise errors[0]

        html_content_id, design_file_id, specification_file_id = stored
        return FanOutResult(
            files=StoredFileIds(
                html_content_id=html_content_id,
                design_file_id=design_file_id,
                specification_file_id=specification_file_id,
            ),
            accessibility=results[ACCESSIBILITY],
            performance=results[PERFORMANCE],
            validation=results[VALIDATION],
        )

    async def _put_optional(self, file) -> Optional[str]:
        if file is None:
            return None
        return await self.file_store.put(file.data, file.filename)

    async def _specification_text(self, request: UploadRequest) -> Optional[str]:
        spec = request.specification_file
        if spec is None:
            return None
        try:
            return await extract_specification_text_async(spec.filename, spec.data)
        except SpecificationExtractionError as e:
            logger.warning(f"Sending review without specification: {e}")
            return None

    @staticmethod
    def _design_attachment(request: UploadRequest) -> Optional[DesignAttachment]:
        design = request.design_file
        if design is None:
            return None
        content_type = (
            design.content_type
            or mimetypes.guess_type(design.filename)[0]
            or "application/octet-stream"
        )
        return DesignAttachment(filename=design.filename, content_type=content_type, data=design.data)

    async def _discard_files(self, file_ids: List[str]) -> None:
        for file_id in file_ids:
            try:
                await self.file_store.delete(file_id)
            except Exception as e:
                logger.warning(f"Could not remove orphaned file {file_id}: {e}")


def _html_name_for(url: Optional[str]) -> str:
    host = urlparse(url).netloc if url else ""
    return f"{host or 'webpage'}.html"
