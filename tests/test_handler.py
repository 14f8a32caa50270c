import asyncio
import json

import pytest

from todo_api.handlers.lambda_handler import handler


@pytest.fixture
def mangum_loop():
    # Mangum drives the app on the current thread's event loop.
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    yield loop
    asyncio.set_event_loop(None)
    loop.close()


def _http_api_event(method, path, headers=None, body=None):
    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": path,
        "rawQueryString": "",
        "headers": {"host": "api.example.com", "content-type": "application/json", **(headers or {})},
        "requestContext": {
            "accountId": "123456789012",
            "apiId": "api-id",
            "domainName": "api.example.com",
            "http": {
                "method": method,
                "path": path,
                "protocol": "HTTP/1.1",
                "sourceIp": "127.0.0.1",
                "userAgent": "pytest",
            },
            "requestId": "id",
            "routeKey": "$default",
            "stage": "$default",
        },
        "body": json.dumps(body) if body is not None else None,
        "isBase64Encoded": False,
    }


def test_lambda_handler_serves_routes(db, mangum_loop):
    res = handler(_http_api_event("GET", "/"), {})
    assert res["statusCode"] == 200
    assert json.loads(res["body"]) == {"status": "ok"}

    res = handler(
        _http_api_event("POST", "/users", body={"name": "Lambda", "username": "lambda"}),
        {},
    )
    assert res["statusCode"] == 201

    res = handler(_http_api_event("GET", "/todos", headers={"username": "lambda"}), {})
    assert res["statusCode"] == 200
    assert json.loads(res["body"]) == []
    assert [user.username for user in db.users] == ["lambda"]


def test_lambda_handler_maps_domain_errors(db, mangum_loop):
    res = handler(_http_api_event("GET", "/todos", headers={"username": "nobody"}), {})
    assert res["statusCode"] == 404
    assert json.loads(res["body"]) == {"error": "User does not exist"}
