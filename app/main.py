from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from pydantic import ValidationError

from app.branding import get_brand_color
from app.config import get_settings
from app.logging_setup import configure_logging
from app.models import RegistryStatus, SellerProfileUpdate
from app.store import DuplicateNameError, SellerRegistry

settings = get_settings()
configure_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load eagerly on startup so the first request does not pay for it
    registry = SellerRegistry(Path(settings.SELLERS_DATA_FILE))
    registry.load()
    app.state.registry = registry
    yield


def get_registry(request: Request) -> SellerRegistry:
    return request.app.state.registry


router = APIRouter()


# ── Sellers ──────────────────────────────────────────────────────────────────

@router.get("/sellers", summary="List all sellers")
def list_sellers(registry: SellerRegistry = Depends(get_registry)):
    sellers = registry.get_sellers_data()
    return {"sellers": [s.to_document() for s in sellers.values()]}


@router.get(
    "/sellers/name-availability",
    summary="Check whether a company name is free to use",
)
def check_company_name(
    company_name: str = Query(..., min_length=1),
    exclude_id: Optional[str] = Query(default=None, description="Seller being renamed"),
    registry: SellerRegistry = Depends(get_registry),
):
    return {
        "company_name": company_name,
        "available": registry.is_company_name_available(company_name, exclude_id),
    }


@router.get("/sellers/{seller_id}", summary="Get seller profile")
def get_seller(seller_id: str, registry: SellerRegistry = Depends(get_registry)):
    seller = registry.get_seller_profile(seller_id)
    if not seller:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    return seller.to_document()


@router.put(
    "/sellers/{seller_id}",
    summary="Create or update a seller profile",
)
def update_seller(
    seller_id: str,
    patch: SellerProfileUpdate,
    registry: SellerRegistry = Depends(get_registry),
):
    try:
        seller = registry.update_seller_profile(seller_id, patch)
    except DuplicateNameError as exc:
        raise HTTPException(409, {"error": str(exc), "errorType": "DUPLICATE_NAME"})
    except ValidationError as exc:
        raise HTTPException(422, str(exc))
    return {
        "success": True,
        "data": seller.to_document(),
        "message": "Seller profile updated successfully",
    }


@router.get("/sellers/{seller_id}/brand-color", summary="Presentation colour for a seller")
def brand_color(seller_id: str):
    return {"seller_id": seller_id, "brand_color": get_brand_color(seller_id)}


# ── Health ───────────────────────────────────────────────────────────────────

@router.get("/health", summary="Registry status", response_model=RegistryStatus)
def health(registry: SellerRegistry = Depends(get_registry)):
    return registry.status()


app = FastAPI(
    title="Coffee Seller Registry",
    version="1.0.0",
    description="Seller profile registry for the coffee marketplace",
    lifespan=lifespan,
)
app.include_router(router, prefix=settings.API_PREFIX)
