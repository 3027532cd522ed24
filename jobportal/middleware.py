from fastapi import Request, Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type, x-user-id",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}


async def cors_headers(request: Request, call_next):
    """
    Answers every pre-flight with an empty 200 before any route runs, and
    stamps the CORS headers on all other responses.
    """
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response
