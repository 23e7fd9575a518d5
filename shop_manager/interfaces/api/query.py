"""Natural-language sales question route."""

from fastapi import APIRouter, Depends

from shop_manager.application.services.product_service import answer_sales_question
from shop_manager.domain.repositories.product_repository import ProductRepository
from shop_manager.domain.schemas.product import QueryRequest, QueryResponse
from shop_manager.interfaces.deps import get_product_repository

router = APIRouter(prefix="/api", tags=["Query"])


@router.post("/query", response_model=QueryResponse)
def sales_query(
    body: QueryRequest,
    repo: ProductRepository = Depends(get_product_repository),
):
    """Answer questions such as "what are weekly sales for perfume?"."""
    return answer_sales_question(repo, body.question)
