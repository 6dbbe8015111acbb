import asyncio
from typing import Any

import httpx
import pytest
from httpx import URL, AsyncClient
from pytest_httpx import HTTPXMock

from convenient_restkit import (
    JSON,
    HTTPMethod,
    NoDataInResponseError,
    RequestConfiguration,
    RequestContent,
    URLDomain,
)
from tests.utils.scarers import (
    CreateScarer,
    ListScarerRecords,
    Scarer,
    ScarerRecord,
)

MIKE = Scarer(name="Mike", nickname=None, url=URL("https://x/y.jpg"))


class Recorder:
    def __init__(self) -> None:
        self.errors: list[BaseException] = []
        self.results: list[Any] = []

    def on_error(self, error: BaseException) -> None:
        self.errors.append(error)

    def on_success(self, result: Any) -> None:
        self.results.append(result)


class GetRoot(RequestConfiguration[JSON]):
    domain = URLDomain("https://example.test/v1")
    method = HTTPMethod.GET


class Untyped(RequestConfiguration):  # type: ignore[type-arg]
    domain = URLDomain("https://example.test")
    method = HTTPMethod.GET


class ExplicitlyTyped(Untyped):
    result_type = ScarerRecord


class TestRequestConfiguration:
    class TestUrlRequest:
        def test_empty_api_path_uses_base_url(self):
            config = GetRoot(AsyncClient())

            assert config.url == URL("https://example.test/v1")
            assert config.url_request().url == URL("https://example.test/v1")

        def test_json_content(self):
            request = CreateScarer(AsyncClient(), MIKE).url_request()

            assert request.method == "POST"
            assert request.url == URL("https://example.test/scarers")
            assert request.headers["Content-Type"] == "application/json"
            assert request.headers["Content-Encoding"] == "gzip"
            assert request.content == MIKE.to_json().raw_bytes()

        def test_compressed_content(self):
            class CreateCompressed(CreateScarer):
                compress_content = True

            request = CreateCompressed(AsyncClient(), MIKE).url_request()

            assert request.content != MIKE.to_json().raw_bytes()
            assert request.headers["Content-Encoding"] == "gzip"

    class TestResultType:
        def test_from_generic_parameter(self):
            assert CreateScarer.resolve_result_type() is Scarer
            assert ListScarerRecords.resolve_result_type() == list[ScarerRecord]

        def test_from_class_attribute(self):
            assert ExplicitlyTyped.resolve_result_type() is ScarerRecord

        def test_missing_result_type(self):
            with pytest.raises(TypeError):
                Untyped.resolve_result_type()

    class TestProcessResponse:
        def test_decodes_json_into_result_type(self):
            response = httpx.Response(201, json=MIKE.to_json().value)

            assert CreateScarer.process_response(response) == MIKE

        def test_empty_body(self):
            with pytest.raises(NoDataInResponseError) as exc_info:
                CreateScarer.process_response(httpx.Response(204))

            assert str(exc_info.value) == "No data"

        def test_status_code_is_not_interpreted(self):
            response = httpx.Response(404, json={"name": "Boo", "url": "https://x"})

            assert CreateScarer.process_response(response).name == "Boo"

        def test_parsed_objects_with_key(self):
            data = b'{"items": [{"name": "Mike", "url": "https://x/y.jpg"}]}'

            assert RequestConfiguration.parsed_objects(Scarer, data, key="items") == [MIKE]

        def test_parsed_object(self):
            data = MIKE.to_json().raw_bytes()

            assert RequestConfiguration.parsed_object(Scarer, data) == MIKE

        def test_json_for_missing_data(self):
            with pytest.raises(NoDataInResponseError):
                RequestConfiguration.json_for_data(None)

    class TestSend:
        @pytest.mark.anyio
        async def test_send_post(self, httpx_mock: HTTPXMock, base_url: str):
            httpx_mock.add_response(
                url=f"{base_url}/scarers",
                method="POST",
                status_code=201,
                json={"name": "Mike", "url": "https://x/y.jpg"},
            )

            async with AsyncClient() as session:
                created = await CreateScarer(session, MIKE).send()

            assert created == MIKE

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "POST"
            assert sent_request.headers["Content-Type"] == "application/json"
            assert sent_request.content == MIKE.to_json().raw_bytes()

        @pytest.mark.anyio
        async def test_send_decodes_pydantic_models(
            self, httpx_mock: HTTPXMock, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}/records",
                status_code=200,
                json=[{"name": "Sulley", "screamCount": 42}],
            )

            async with AsyncClient() as session:
                records = await ListScarerRecords(session).send()

            assert records == [ScarerRecord(name="Sulley", scream_count=42)]

        @pytest.mark.anyio
        async def test_send_propagates_transport_errors(self, httpx_mock: HTTPXMock):
            httpx_mock.add_exception(httpx.ConnectError("connection refused"))

            async with AsyncClient() as session:
                with pytest.raises(httpx.ConnectError):
                    await ListScarerRecords(session).send()

    class TestTasks:
        @pytest.mark.anyio
        async def test_data_task_is_not_started(self):
            recorder = Recorder()

            async with AsyncClient() as session:
                coroutine = ListScarerRecords(session).data_task(
                    recorder.on_error, recorder.on_success
                )
                assert asyncio.iscoroutine(coroutine)
                coroutine.close()

            assert recorder.errors == []
            assert recorder.results == []

        @pytest.mark.anyio
        async def test_perform_task_success(self, httpx_mock: HTTPXMock, base_url: str):
            httpx_mock.add_response(
                url=f"{base_url}/records",
                json=[{"name": "Sulley", "screamCount": 42}],
            )
            recorder = Recorder()

            async with AsyncClient() as session:
                task = ListScarerRecords(session).perform_task(
                    recorder.on_error, recorder.on_success
                )
                assert task is not None
                await task

            assert recorder.errors == []
            assert recorder.results == [[ScarerRecord(name="Sulley", scream_count=42)]]

        @pytest.mark.anyio
        async def test_perform_task_transport_error(self, httpx_mock: HTTPXMock):
            httpx_mock.add_exception(httpx.ReadTimeout("timed out"))
            recorder = Recorder()

            async with AsyncClient() as session:
                task = ListScarerRecords(session).perform_task(
                    recorder.on_error, recorder.on_success
                )
                assert task is not None
                await task

            assert recorder.results == []
            assert len(recorder.errors) == 1
            assert isinstance(recorder.errors[0], httpx.ReadTimeout)

        @pytest.mark.anyio
        async def test_perform_task_decoding_error(
            self, httpx_mock: HTTPXMock, base_url: str
        ):
            httpx_mock.add_response(url=f"{base_url}/records", json={"not": "a list"})
            recorder = Recorder()

            async with AsyncClient() as session:
                task = ListScarerRecords(session).perform_task(
                    recorder.on_error, recorder.on_success
                )
                assert task is not None
                await task

            assert recorder.results == []
            assert [str(error) for error in recorder.errors] == ["Wrong json format"]

        @pytest.mark.anyio
        async def test_perform_task_request_construction_error(self):
            class CreateBroken(CreateScarer):
                def __init__(self, session: AsyncClient) -> None:
                    super().__init__(session, MIKE)
                    self.content = RequestContent.json({"when": object()})

            recorder = Recorder()

            async with AsyncClient() as session:
                task = CreateBroken(session).perform_task(
                    recorder.on_error, recorder.on_success
                )

            assert task is None
            assert recorder.results == []
            assert len(recorder.errors) == 1
            assert isinstance(recorder.errors[0], TypeError)

        @pytest.mark.anyio
        async def test_perform_task_keeps_task_alive_until_done(
            self, httpx_mock: HTTPXMock, base_url: str
        ):
            httpx_mock.add_response(url=f"{base_url}/records", json=[])
            recorder = Recorder()

            async with AsyncClient() as session:
                task = ListScarerRecords(session).perform_task(
                    recorder.on_error, recorder.on_success
                )
                assert task is not None
                assert task in RequestConfiguration._pending_tasks

                await task
                await asyncio.sleep(0)

            assert task not in RequestConfiguration._pending_tasks
            assert recorder.results == [[]]
