# tests/test_lambda.py
import json

from src.api.lambda_handler import handler


class _Context:
    function_name = "premium-savings-estimator"
    aws_request_id = "req-1"


def _http_api_event(method: str, path: str, body=None) -> dict:
    # API Gateway HTTP API (payload format 2.0)
    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": path,
        "rawQueryString": "",
        "headers": {
            "host": "abc123.execute-api.us-east-1.amazonaws.com",
            "content-type": "application/json",
            "x-forwarded-port": "443",
            "x-forwarded-proto": "https",
        },
        "requestContext": {
            "accountId": "123456789012",
            "apiId": "abc123",
            "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
            "domainPrefix": "abc123",
            "http": {
                "method": method,
                "path": path,
                "protocol": "HTTP/1.1",
                "sourceIp": "127.0.0.1",
                "userAgent": "pytest",
            },
            "requestId": "req-1",
            "routeKey": "$default",
            "stage": "$default",
            "time": "19/Oct/2026:00:00:00 +0000",
            "timeEpoch": 1792368000000,
        },
        "body": None if body is None else json.dumps(body),
        "isBase64Encoded": False,
    }


def test_lambda_health():
    resp = handler(_http_api_event("GET", "/health"), _Context())
    assert resp["statusCode"] == 200
    assert json.loads(resp["body"])["status"] == "ok"


def test_lambda_estimate():
    resp = handler(_http_api_event("POST", "/estimate", {"currentPremium": 180}), _Context())
    assert resp["statusCode"] == 200
    body = json.loads(resp["body"])
    assert body["breakdown"]["monthly_savings"] == 24
    assert body["display"]["estimated_new_premium"] == "$156/mo"


def test_lambda_unknown_route():
    resp = handler(_http_api_event("GET", "/missing"), _Context())
    assert resp["statusCode"] == 404
