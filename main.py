from log_config.logging_config import setup_logging
setup_logging()
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from config import CORS_METHODS, CORS_ORIGIN, HOST, PORT
from constants.doctor_status import MESSAGES
from database import lifespan
from routers import doctors
from utils.exceptions import DoctorError, doctor_error_handler, request_validation_handler

app = FastAPI(title="Doctors Directory API", lifespan=lifespan)

# CORS: the frontend only declares GET and POST
app.add_middleware(
    CORSMiddleware,
    allow_origins=[CORS_ORIGIN],
    allow_methods=CORS_METHODS,
)

# Errors -> {"message": ..., "error": ...}
app.add_exception_handler(DoctorError, doctor_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)

# Routers
app.include_router(doctors.router, tags=["Doctors"])


@app.get("/", response_class=PlainTextResponse)
async def root():
    return MESSAGES["ROOT"]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
