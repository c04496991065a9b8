from fastapi import APIRouter, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse

from passgen.core.logging import get_logger
from passgen.models.generation import GenerationRequest
from passgen.services.password_service import generate_passwords
from passgen.services.render_service import render_form

router = APIRouter()
log = get_logger()


@router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def form_page():
    """
    Render the empty generator form.
    """
    return HTMLResponse(render_form())


@router.post("/", response_class=HTMLResponse)
async def generate_page(request: Request):
    """
    Generate a batch of passwords from the submitted form and render it.

    Unusable field values fall back to their defaults; this endpoint does
    not answer with validation errors.
    """
    payload = None
    try:
        form = await request.form()
        payload = GenerationRequest.from_form(form)

        log.info(
            "generate_page.start",
            extra={
                "count": payload.count,
                "length": payload.length,
                "category": payload.category,
                "include_special": payload.include_special,
            },
        )

        fallbacks = payload.fallbacks(form)
        if fallbacks:
            log.info("generate_page.fallback", extra={"fields": fallbacks})

        # Batch size is unbounded, keep the event loop free while generating.
        passwords = await run_in_threadpool(
            generate_passwords,
            payload.count,
            payload.length,
            include_special=payload.include_special,
            category=payload.category,
        )
        html = render_form(passwords, payload)

        log.info(
            "generate_page.success",
            extra={"generated": len(passwords)},
        )

        return HTMLResponse(html)

    except HTTPException:
        raise
    except Exception:
        log.exception(
            "generate_page.failed",
            extra={
                "count": payload.count if payload else None,
                "length": payload.length if payload else None,
            },
        )
        raise HTTPException(
            status_code=500,
            detail="Password generation failed",
        )
