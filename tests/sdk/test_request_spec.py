import dataclasses

import pytest

from hatstall import HttpMethod, RequestSpec


class TestHttpMethod:
    def test_all_verbs(self):
        assert [method.value for method in HttpMethod] == [
            "OPTIONS",
            "GET",
            "HEAD",
            "POST",
            "PUT",
            "PATCH",
            "DELETE",
            "TRACE",
            "CONNECT",
        ]

    @pytest.mark.parametrize(
        "method, has_body",
        [
            (HttpMethod.GET, False),
            (HttpMethod.DELETE, False),
            (HttpMethod.HEAD, False),
            (HttpMethod.POST, True),
            (HttpMethod.PUT, True),
            (HttpMethod.PATCH, True),
        ],
    )
    def test_has_body(self, method: HttpMethod, has_body: bool):
        assert method.has_body is has_body


class TestRequestSpec:
    def test_method_is_coerced(self):
        spec = RequestSpec(method="GET", path="https://api.example.com/")  # type: ignore[arg-type]

        assert spec.method is HttpMethod.GET

    def test_unknown_method_is_rejected(self):
        with pytest.raises(ValueError):
            RequestSpec(method="FETCH", path="/")  # type: ignore[arg-type]

    def test_spec_is_immutable(self):
        params = {"a": 1}
        spec = RequestSpec(method=HttpMethod.POST, path="/", params=params)

        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.path = "/other"  # type: ignore[misc]
        with pytest.raises(TypeError):
            spec.params["b"] = 2  # type: ignore[index]

        params["a"] = 99
        assert spec.params["a"] == 1

    def test_is_multipart(self):
        assert not RequestSpec(method=HttpMethod.POST, path="/").is_multipart
        assert RequestSpec(
            method=HttpMethod.POST, path="/", files={"f": b"x"}
        ).is_multipart
