from fastapi.responses import JSONResponse


def message_response(message: str, status_code: int = 200):
    """
    Confirmation response for operations that return no record
    """
    return JSONResponse(content={"message": message}, status_code=status_code)


def error_response(message: str, error: str, status_code: int = 400):
    """
    Standard error response
    """
    return JSONResponse(
        content={"message": message, "error": error},
        status_code=status_code
    )
