"""Documents API: documents visible to the caller."""

from typing import Annotated

from fastapi import APIRouter, Depends

from portal.api.v1.dependencies import CurrentContext, get_list_documents_use_case
from portal.application.use_cases import ListDocumentsUseCase
from portal.schemas.document import DocumentResponse

router = APIRouter()


@router.get("", response_model=list[DocumentResponse])
async def list_documents(
    ctx: CurrentContext,
    use_case: Annotated[ListDocumentsUseCase, Depends(get_list_documents_use_case)],
):
    """Documents the caller's role and department allow, newest first."""
    views = await use_case.execute(ctx)
    return [DocumentResponse.from_view(v) for v in views]
