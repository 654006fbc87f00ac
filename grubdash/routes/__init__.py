from fastapi.responses import JSONResponse, Response

from grubdash.results import HandlerResult


def to_response(result: HandlerResult) -> Response:
    if result.body is None:
        return Response(status_code=result.status_code)
    return JSONResponse(status_code=result.status_code, content=result.body)
