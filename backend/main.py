import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Path, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

import database
from auth import get_current_user
from config import settings
from errors import AuthError, BookingAPIError, ConflictError, InternalError, NotFoundError
from models import User
from repository import BookingRepository
from schemas import (
    MAX_ID,
    BookingCreate,
    BookingOut,
    BookingResponse,
    BookingUpdate,
    CreatedResponse,
    SuccessResponse,
)
from seed import seed
from services import BookingService

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    AuthError: 403,
    NotFoundError: 404,
    ConflictError: 422,
    InternalError: 500,
    BookingAPIError: 500,
}


# ================== APP ==================
@asynccontextmanager
async def lifespan(app: FastAPI):
    database.init_db()
    if settings.SEED_ON_STARTUP:
        with database.SessionLocal() as db:
            seed(db)
    logger.info("Parking booking API is ready")
    yield


app = FastAPI(title="Parking Booking API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_booking_service(db: Session = Depends(database.get_session)) -> BookingService:
    return BookingService(BookingRepository(db))


# ================== ERRORS ==================
def status_for(exc: BookingAPIError) -> int:
    for klass in type(exc).__mro__:
        if klass in ERROR_STATUS:
            return ERROR_STATUS[klass]
    return 500


@app.exception_handler(BookingAPIError)
async def booking_error_handler(request: Request, exc: BookingAPIError):
    status_code = status_for(exc)
    message = exc.message if status_code < 500 else InternalError.default_message
    return JSONResponse(status_code=status_code, content={"message": message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    issues = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"message": "Bad Request", "issues": issues},
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


# ================== API ==================
@app.get("/ping")
def ping():
    return {"message": "pong"}


@app.post("/bookings", status_code=201, response_model=CreatedResponse)
def create_booking(
    data: BookingCreate,
    user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    booking = service.create(user.id, data.parking_id, data.start_date, data.end_date)
    return CreatedResponse(id=booking.id)


@app.get("/bookings/{booking_id}", response_model=BookingResponse)
def get_booking(
    booking_id: int = Path(le=MAX_ID),
    user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    booking = service.get_by_id(user, booking_id)
    return BookingResponse(data=BookingOut.model_validate(booking))


@app.patch("/bookings/{booking_id}", response_model=SuccessResponse)
def update_booking(
    data: BookingUpdate,
    booking_id: int = Path(le=MAX_ID),
    user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    service.update(user, booking_id, data.start_date, data.end_date)
    return SuccessResponse()


@app.delete("/bookings/{booking_id}", response_model=SuccessResponse)
def delete_booking(
    booking_id: int = Path(le=MAX_ID),
    user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service),
):
    service.delete_by_id(user, booking_id)
    return SuccessResponse()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=3000)
