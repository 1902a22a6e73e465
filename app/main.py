from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
import logging
import uvicorn

from app.schemas import AuctionCreate, Listing, Section, SignupRequest
from app.store import AuctionStore
from config.settings import get_settings


logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("mvp_auctions")


def get_store(request: Request) -> AuctionStore:
    return request.app.state.store


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(
    store: Optional[AuctionStore] = None,
    static_root: Optional[str] = None,
    index_document: Optional[str] = None,
) -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="MVP Auctions", version="1.0.0")
    app.state.store = store if store is not None else AuctionStore()
    app.state.static_root = Path(static_root or settings.static_root).resolve()
    app.state.index_document = index_document or settings.index_document

    # CORS: allow local frontend during development
    if settings.app_env.lower() in {"dev", "development", "local"}:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return _error(400, "Invalid request body")

    @app.get("/api/auctions/trending")
    def trending_auctions(store: AuctionStore = Depends(get_store)) -> List[Dict[str, Any]]:
        return [listing.model_dump() for listing in store.list_section(Section.TRENDING)]

    @app.get("/api/auctions/featured")
    def featured_auctions(store: AuctionStore = Depends(get_store)) -> List[Dict[str, Any]]:
        return [listing.model_dump() for listing in store.list_section(Section.FEATURED)]

    @app.post("/api/auctions")
    def add_auction(req: AuctionCreate, store: AuctionStore = Depends(get_store)):
        if not (req.section and req.title and req.bid and req.deadline):
            logger.info("Rejected auction: missing fields")
            return _error(400, "Missing fields")
        try:
            section = Section(req.section)
        except ValueError:
            logger.info("Rejected auction: invalid section %r", req.section)
            return _error(400, "Invalid section")

        listing = Listing(title=req.title, bid=req.bid, deadline=req.deadline)
        store.add(section, listing)
        logger.info(
            "Auction added: section=%s title=%s deadline=%s",
            section.value,
            listing.title,
            listing.deadline,
        )
        return {"message": "Auction added", "auction": listing.model_dump()}

    @app.post("/api/signup")
    def signup(req: SignupRequest):
        if not (req.name and req.email and req.password):
            return _error(400, "Please provide name, email and password")
        # Nothing is stored; the user is echoed back without the password.
        logger.info("Signup accepted for %s", req.email)
        return {"message": "Signup successful", "user": {"name": req.name, "email": req.email}}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.api_route("/{full_path:path}", methods=["GET", "HEAD"], include_in_schema=False)
    def static_files(full_path: str, request: Request):
        root: Path = request.app.state.static_root
        if full_path:
            candidate = (root / full_path).resolve()
            if candidate.is_relative_to(root) and candidate.is_file():
                return FileResponse(candidate)
        index = root / request.app.state.index_document
        if index.is_file():
            return FileResponse(index)
        return _error(404, "Not found")

    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    logger.info("MVP Auctions server running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
