from starlette.requests import Request

from content_review.utils.security import clean_filename, get_client_ip, mask_ip


def _request(headers=None, client=("192.0.2.10", 5000)):
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "client": client,
    }
    return Request(scope)


def test_client_ip_prefers_first_forwarded_address():
    req = _request({"X-Forwarded-For": "203.0.113.5, 10.0.0.2", "X-Real-IP": "10.0.0.9"})
    assert get_client_ip(req) == "203.0.113.5"


def test_client_ip_falls_back_in_order():
    assert get_client_ip(_request({"X-Real-IP": "10.0.0.9"})) == "10.0.0.9"
    assert get_client_ip(_request()) == "192.0.2.10"
    assert get_client_ip(_request(client=None)) == "localhost"


def test_mask_ip():
    assert mask_ip("203.0.113.42") == "203.0.***.42"
    assert mask_ip("localhost") == "lo****st"


def test_clean_filename():
    assert clean_filename(None) == "document.txt"
    assert clean_filename("   ") == "document.txt"
    assert clean_filename("../../etc/passwd") == "passwd"
    assert clean_filename("C:\\Users\\me\\blog.txt") == "blog.txt"


def test_proxy_headers_ignored_when_untrusted(monkeypatch):
    from content_review.config import settings

    monkeypatch.setattr(settings, "TRUST_PROXY_HEADERS", False)
    req = _request({"X-Forwarded-For": "203.0.113.5", "X-Real-IP": "10.0.0.9"})
    assert get_client_ip(req) == "192.0.2.10"
