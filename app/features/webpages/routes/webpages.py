from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status
from fastapi.responses import Response

from app.features.auth.dependencies import get_user_service
from app.features.auth.services.user_service import UserService
from app.features.webpages.dependencies import get_upload_orchestrator, get_webpage_service
from app.features.webpages.schemas.webpage import UploadRequest
from app.features.webpages.services.upload_orchestrator import UploadOrchestrator
from app.features.webpages.services.webpage_service import WebpageService
from app.platform.logger import get_logger
from app.platform.response import api_response
from app.platform.utils.email import validate_email_param
from app.platform.utils.file_upload import read_upload

logger = get_logger(__name__)

router = APIRouter(tags=["Webpages"])


def _service_unavailable(action: str, error: Exception) -> HTTPException:
    logger.error(f"{action} failed: {error}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Something went wrong"
    )


async def _require_user_id(email: Optional[str], user_service: UserService) -> str:
    validate_email_param(email)
    user_id = await user_service.get_user_id_by_email(email)
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Please Sign up")
    return user_id


@router.post(
    "/upload",
    status_code=status.HTTP_200_OK,
    summary="Upload a webpage for analysis",
    description="Analyze an HTML file or a URL, with an optional design image and specification",
)
async def upload_webpage(
    email: Optional[str] = Query(None),
    name: Optional[str] = Form(None),
    url: Optional[str] = Form(None),
    html_file: Optional[UploadFile] = File(None, alias="htmlFile"),
    design_file: Optional[UploadFile] = File(None, alias="designFile"),
    specification_file: Optional[UploadFile] = File(None, alias="specificationFile"),
    orchestrator: UploadOrchestrator = Depends(get_upload_orchestrator),
):
    """
    Runs the accessibility, performance and validation analyzers plus the LLM
    review, then stores the webpage. Analyzer failures are recorded as error
    flags on the analysis result and do not fail the upload.
    """
    try:
        request = UploadRequest(
            name=name,
            email=email,
            url=url,
            html_file=await read_upload(html_file),
            design_file=await read_upload(design_file),
            specification_file=await read_upload(specification_file),
        )
        webpage_id = await orchestrator.upload(request)
    except HTTPException:
        raise
    except Exception as e:
        raise _service_unavailable("Upload", e)

    return api_response(data=webpage_id, message="Webpage uploaded and analyzed successfully")


@router.get("/list-webpages", summary="List the user's webpages")
async def list_webpages(
    email: Optional[str] = Query(None),
    user_service: UserService = Depends(get_user_service),
    webpage_service: WebpageService = Depends(get_webpage_service),
):
    try:
        user_id = await _require_user_id(email, user_service)
        webpages = await webpage_service.list_webpages(user_id)
    except HTTPException:
        raise
    except Exception as e:
        raise _service_unavailable("Listing webpages", e)

    return api_response(
        data=[webpage.model_dump(by_alias=True) for webpage in webpages],
        message="Webpages retrieved successfully",
    )


@router.get("/view-webpage/{webpage_id}", summary="View a webpage and its analysis result")
async def view_webpage(
    webpage_id: str,
    email: Optional[str] = Query(None),
    user_service: UserService = Depends(get_user_service),
    webpage_service: WebpageService = Depends(get_webpage_service),
):
    try:
        user_id = await _require_user_id(email, user_service)
        content = await webpage_service.get_content_and_analysis(webpage_id, user_id)
    except HTTPException:
        raise
    except Exception as e:
        raise _service_unavailable("Viewing webpage", e)

    return api_response(
        data=content.model_dump(by_alias=True), message="Webpage retrieved successfully"
    )


@router.get("/download-designfile/{webpage_id}", summary="Download the design file")
async def download_design_file(
    webpage_id: str,
    email: Optional[str] = Query(None),
    user_service: UserService = Depends(get_user_service),
    webpage_service: WebpageService = Depends(get_webpage_service),
):
    try:
        user_id = await _require_user_id(email, user_service)
        stored, content_type = await webpage_service.get_design_file(webpage_id, user_id)
    except HTTPException:
        raise
    except Exception as e:
        raise _service_unavailable("Downloading design file", e)

    return Response(
        content=stored.data,
        media_type=content_type,
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(stored.filename)}"
        },
    )


@router.get("/download-specifications/{webpage_id}", summary="Download the specification text")
async def download_specifications(
    webpage_id: str,
    email: Optional[str] = Query(None),
    user_service: UserService = Depends(get_user_service),
    webpage_service: WebpageService = Depends(get_webpage_service),
):
    try:
        user_id = await _require_user_id(email, user_service)
        specification = await webpage_service.get_specification(webpage_id, user_id)
    except HTTPException:
        raise
    except Exception as e:
        raise _service_unavailable("Downloading specification", e)

    return api_response(data=specification.model_dump(), message="Specification retrieved successfully")
