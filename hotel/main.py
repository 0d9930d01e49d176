from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hotel.api.routes import admin_analytics, auth, bookings, halls, payments, reviews, rooms, settings
from hotel.core.errors import HotelError, PersistenceError
from hotel.core.logging_config import get_logger
from hotel.db.slots import build_storage
from hotel.services.booking_flow import BookingFlow
from hotel.services.payment_gateway import SimulatedPaymentGateway
from hotel.services.store import HotelStore

logger = get_logger()


def create_app(store: Optional[HotelStore] = None, booking_flow: Optional[BookingFlow] = None) -> FastAPI:
    """Build the API around an explicit store.

    Without one, the store is built from the configured slot backend at
    start-up.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "store", None) is None:
            app.state.store = HotelStore(build_storage())
            logger.info("Hotel store loaded")
        if getattr(app.state, "booking_flow", None) is None:
            app.state.booking_flow = BookingFlow(app.state.store, SimulatedPaymentGateway())
        yield

    app = FastAPI(
        title="Hotel Infinity API",
        version="1.0.0",
        description="API for Rooms, Party Halls, Reviews, Bookings, Payments & Admin Back-Office",
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.booking_flow = booking_flow or (BookingFlow(store, SimulatedPaymentGateway()) if store else None)

    # ⭐ Request Logging Middleware
    @app.middleware("http")
    async def log_requests(request, call_next):
        logger.info(f"REQUEST: {request.method} {request.url.path}")

        try:
            response = await call_next(request)
            logger.info(f"RESPONSE: {response.status_code} {request.url.path}")
            return response

        except Exception as e:
            logger.error(f"ERROR: {request.url.path} -> {str(e)}")
            raise

    # ⭐ Domain errors -> JSON with the matching status code
    @app.exception_handler(HotelError)
    async def hotel_error_handler(request: Request, exc: HotelError):
        if isinstance(exc, PersistenceError):
            logger.error(f"PERSISTENCE: {request.url.path} -> {exc.message} | slots={exc.keys}")
        else:
            logger.warning(f"{type(exc).__name__}: {request.url.path} -> {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    # ⭐ CORS (important for frontend)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router)
    app.include_router(rooms.router)
    app.include_router(halls.router)
    app.include_router(reviews.router)
    app.include_router(bookings.router)
    app.include_router(payments.router)
    app.include_router(settings.router)
    app.include_router(admin_analytics.router)

    @app.get("/", tags=["Root"])
    def root():
        return {"message": "Backend running successfully"}

    return app


app = create_app()
