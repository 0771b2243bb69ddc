"""Tests for the control plane HTTP client."""

from __future__ import annotations

import json

import httpx
import pytest

from eksphemeral.controllers.control_plane.client import ALL_CLUSTERS, ControlPlaneClient
from eksphemeral.controllers.control_plane.exceptions import (
    ControlPlaneError,
    ServiceError,
    TransportError,
)
from eksphemeral.models.core.cluster_info import ClusterSpec

BASE_URL = "http://control-plane.test"


def make_client(handler) -> ControlPlaneClient:
    return ControlPlaneClient(BASE_URL, timeout=2.0, transport=httpx.MockTransport(handler))


DETAIL_PAYLOAD = {
    "id": "abc-123",
    "name": "demo",
    "kubeversion": "1.14",
    "numworkers": 2,
    "created": "1549900800",
    "timeout": 60,
    "ttl": 42,
    "owner": "dev@example.com",
    "details": {
        "status": "ACTIVE",
        "endpoint": "https://ABC.eks.amazonaws.com",
        "platformv": "eks.2",
        "vpcconf": {"subnetIds": ["subnet-1"]},
        "iamrole": "arn:aws:iam::123:role/eks",
    },
}


class TestListClusters:
    """Tests for ControlPlaneClient.list_clusters."""

    @pytest.mark.asyncio
    async def test_requests_all_clusters(self) -> None:
        """Listing queries /status with the wildcard id."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=["a", "b"])

        async with make_client(handler) as client:
            ids = await client.list_clusters()

        assert ids == ["a", "b"]
        assert seen[0].method == "GET"
        assert seen[0].url.path == "/status"
        assert seen[0].url.params["cluster"] == ALL_CLUSTERS

    @pytest.mark.asyncio
    async def test_null_payload_is_empty(self) -> None:
        """A JSON null inventory means no clusters."""
        async with make_client(lambda request: httpx.Response(200, text="null")) as client:
            assert await client.list_clusters() == []

    @pytest.mark.asyncio
    async def test_empty_body_is_empty(self) -> None:
        """An empty body means no clusters."""
        async with make_client(lambda request: httpx.Response(200, text="")) as client:
            assert await client.list_clusters() == []

    @pytest.mark.asyncio
    async def test_non_list_payload_is_service_error(self) -> None:
        """An object where a list is expected is a ServiceError."""
        async with make_client(lambda request: httpx.Response(200, json={"x": 1})) as client:
            with pytest.raises(ServiceError):
                await client.list_clusters()

    @pytest.mark.asyncio
    async def test_malformed_json_is_service_error(self) -> None:
        """Undecodable JSON is a ServiceError."""
        async with make_client(lambda request: httpx.Response(200, text="[oops")) as client:
            with pytest.raises(ServiceError, match="Malformed JSON"):
                await client.list_clusters()


class TestGetDetail:
    """Tests for ControlPlaneClient.get_detail."""

    @pytest.mark.asyncio
    async def test_parses_detail(self) -> None:
        """Detail payload is decoded into a ClusterDetail."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["cluster"] == "abc-123"
            return httpx.Response(200, json=DETAIL_PAYLOAD)

        async with make_client(handler) as client:
            detail = await client.get_detail("abc-123")

        assert detail.name == "demo"
        assert detail.num_workers == 2
        assert detail.created_at == 1549900800
        assert detail.ttl_minutes_remaining == 42
        assert detail.status.platform_version == "eks.2"
        assert "subnet-1" in detail.status.vpc_config

    @pytest.mark.asyncio
    async def test_missing_id_is_filled_in(self) -> None:
        """A detail without an id takes the requested id."""
        payload = {key: value for key, value in DETAIL_PAYLOAD.items() if key != "id"}
        async with make_client(lambda request: httpx.Response(200, json=payload)) as client:
            detail = await client.get_detail("abc-123")
        assert detail.id == "abc-123"

    @pytest.mark.asyncio
    async def test_unknown_id_is_service_error(self) -> None:
        """An unknown id yields a ServiceError carrying the server text."""
        handler = lambda request: httpx.Response(404, text="no such cluster")  # noqa: E731
        async with make_client(handler) as client:
            with pytest.raises(ServiceError) as exc_info:
                await client.get_detail("nope")
        assert str(exc_info.value) == "no such cluster"
        assert exc_info.value.status_code == 404
        assert exc_info.value.endpoint == "/status"

    @pytest.mark.asyncio
    async def test_non_object_payload_is_service_error(self) -> None:
        """A list where an object is expected is a ServiceError."""
        async with make_client(lambda request: httpx.Response(200, json=[])) as client:
            with pytest.raises(ServiceError):
                await client.get_detail("abc-123")

    @pytest.mark.asyncio
    async def test_empty_object_is_service_error(self) -> None:
        """A detail without a name means the cluster does not exist."""
        async with make_client(lambda request: httpx.Response(200, json={})) as client:
            with pytest.raises(ServiceError, match="does not exist") as exc_info:
                await client.get_detail("nope")
        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_invalid_fields_are_service_error(self) -> None:
        """Fields that fail validation surface as a ServiceError."""
        payload = {**DETAIL_PAYLOAD, "numworkers": "many"}
        async with make_client(lambda request: httpx.Response(200, json=payload)) as client:
            with pytest.raises(ServiceError, match="Invalid detail"):
                await client.get_detail("abc-123")


class TestConfigCommand:
    """Tests for ControlPlaneClient.get_config_command."""

    @pytest.mark.asyncio
    async def test_returns_plain_text(self) -> None:
        """The config command is returned verbatim."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/configof"
            return httpx.Response(200, text="aws eks update-kubeconfig --name demo\n")

        async with make_client(handler) as client:
            command = await client.get_config_command("abc-123")
        assert command == "aws eks update-kubeconfig --name demo"

    @pytest.mark.asyncio
    async def test_unwraps_json_string(self) -> None:
        """A JSON-encoded string body is unwrapped."""
        body = json.dumps("aws eks update-kubeconfig --name demo")
        async with make_client(lambda request: httpx.Response(200, text=body)) as client:
            assert await client.get_config_command("x") == "aws eks update-kubeconfig --name demo"


class TestCreateCluster:
    """Tests for ControlPlaneClient.create_cluster."""

    @pytest.mark.asyncio
    async def test_posts_wire_payload(self) -> None:
        """The spec is posted with the control plane's field names."""
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            assert request.url.path == "/create"
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json="c1-9f8")

        spec = ClusterSpec(
            name="c1", num_workers=3, kube_version="1.14", timeout_minutes=60, owner="a@b.com"
        )
        async with make_client(handler) as client:
            cluster_id = await client.create_cluster(spec)

        assert cluster_id == "c1-9f8"
        assert bodies == [
            {
                "name": "c1",
                "numworkers": 3,
                "kubeversion": "1.14",
                "timeout": 60,
                "owner": "a@b.com",
            }
        ]

    @pytest.mark.asyncio
    async def test_rejection_carries_server_message(self) -> None:
        """A provisioning rejection surfaces the body text."""
        handler = lambda request: httpx.Response(400, text="invalid worker count")  # noqa: E731
        spec = ClusterSpec(
            name="c1", num_workers=3, kube_version="1.14", timeout_minutes=60, owner="a@b.com"
        )
        async with make_client(handler) as client:
            with pytest.raises(ServiceError, match="invalid worker count"):
                await client.create_cluster(spec)

    @pytest.mark.asyncio
    async def test_empty_id_is_service_error(self) -> None:
        """An empty success body is not a cluster id."""
        spec = ClusterSpec(
            name="c1", num_workers=1, kube_version="1.14", timeout_minutes=10, owner="a@b.com"
        )
        async with make_client(lambda request: httpx.Response(200, text="")) as client:
            with pytest.raises(ServiceError, match="no cluster id"):
                await client.create_cluster(spec)

    @pytest.mark.asyncio
    async def test_create_is_not_retried(self) -> None:
        """A failed create issues exactly one request."""
        count = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal count
            count += 1
            return httpx.Response(503, text="")

        spec = ClusterSpec(
            name="c1", num_workers=1, kube_version="1.14", timeout_minutes=10, owner="a@b.com"
        )
        async with make_client(handler) as client:
            with pytest.raises(ServiceError, match="status 503"):
                await client.create_cluster(spec)
        assert count == 1


class TestProlongCluster:
    """Tests for ControlPlaneClient.prolong_cluster."""

    @pytest.mark.asyncio
    async def test_posts_id_and_ptime(self) -> None:
        """Prolong posts the id and the extension in minutes."""
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/prolong"
            bodies.append(json.loads(request.content))
            return httpx.Response(200, text="Extended abc by 30 min")

        async with make_client(handler) as client:
            ack = await client.prolong_cluster("abc", 30)

        assert ack == "Extended abc by 30 min"
        assert bodies == [{"id": "abc", "ptime": 30}]


class TestTransportFailures:
    """Tests for network-level failures."""

    @pytest.mark.asyncio
    async def test_connect_error_is_transport_error(self) -> None:
        """No response at all maps to TransportError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(TransportError) as exc_info:
                await client.list_clusters()

        assert isinstance(exc_info.value, ControlPlaneError)
        assert isinstance(exc_info.value.original_error, httpx.ConnectError)
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_close_resets_client(self) -> None:
        """close() drops the underlying HTTP client and tolerates repeats."""
        client = make_client(lambda request: httpx.Response(200, json=[]))
        await client.list_clusters()
        assert client._client is not None
        await client.close()
        assert client._client is None
        await client.close()

    def test_base_url_trailing_slash_is_stripped(self) -> None:
        """The base URL is normalized."""
        client = ControlPlaneClient(f"{BASE_URL}/")
        assert client.base_url == BASE_URL
