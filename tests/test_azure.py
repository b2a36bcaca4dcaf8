import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from translator.azure import AzureTranslator
from translator.base import ContentType, TranslationRequest
from translator.errors import ExpiredOrInvalidResponse, MissingCredentialsError, RemoteTranslationError
from translator.orchestrator import TranslationOrchestrator
from translator.service import TranslationService


class RecordingApi:
    """Minimal stand-in for the Translator v3 endpoints."""

    def __init__(self, *, status=200, translate_body=None, sentence_lengths=None, delay=0.0, slow_after=0):
        self.status = status
        self.delay = delay
        self.slow_after = slow_after
        self.translate_body = translate_body
        self.sentence_lengths = sentence_lengths or [4, 6]
        self.calls = []

    async def translate(self, request):
        payload = await request.json()
        self.calls.append(("translate", dict(request.query), payload, request.headers.copy()))
        if self.delay and len(self.calls) > self.slow_after:
            await asyncio.sleep(self.delay)
        if self.status != 200:
            return web.Response(status=self.status, text="quota exceeded")
        if self.translate_body is not None:
            return web.Response(text=self.translate_body, content_type="application/json")
        target = request.query["to"]
        return web.json_response(
            [{"translations": [{"text": f"{target}:{item['Text']}", "to": target}]} for item in payload]
        )

    async def breaksentence(self, request):
        payload = await request.json()
        self.calls.append(("breaksentence", dict(request.query), payload, request.headers.copy()))
        return web.json_response([{"sentLen": self.sentence_lengths}])


def _run(api, scenario, **options):
    async def main():
        app = web.Application()
        app.router.add_post("/translate", api.translate)
        app.router.add_post("/breaksentence", api.breaksentence)
        server = TestServer(app)
        await server.start_server()
        translator = AzureTranslator(
            subscription_key="secret",
            subscription_region="westeurope",
            endpoint=str(server.make_url("/")),
            **options,
        )
        try:
            return await scenario(translator)
        finally:
            await translator.close()
            await server.close()

    return asyncio.run(main())


def test_translate_sends_array_and_keeps_order():
    api = RecordingApi()
    request = TranslationRequest(texts=["one", "two"], source_lang="en", target_lang="de", category="tech")

    result = _run(api, lambda translator: translator.translate_texts(request))

    assert result == ["de:one", "de:two"]
    route, query, payload, headers = api.calls[0]
    assert route == "translate"
    assert query == {"api-version": "3.0", "from": "en", "to": "de", "category": "tech"}
    assert payload == [{"Text": "one"}, {"Text": "two"}]
    assert headers["Ocp-Apim-Subscription-Key"] == "secret"
    assert headers["Ocp-Apim-Subscription-Region"] == "westeurope"


def test_html_requests_set_text_type():
    api = RecordingApi()
    request = TranslationRequest(texts=["<b>x</b>"], source_lang="en", target_lang="fr", content_type=ContentType.HTML)

    _run(api, lambda translator: translator.translate_texts(request))

    assert api.calls[0][1]["textType"] == "html"


def test_error_status_raises_remote_error():
    api = RecordingApi(status=403)
    request = TranslationRequest(texts=["one"], source_lang="en", target_lang="de")

    with pytest.raises(RemoteTranslationError) as info:
        _run(api, lambda translator: translator.translate_texts(request))

    assert info.value.status == 403
    assert info.value.body == "quota exceeded"


def test_empty_result_list_comes_back_empty():
    api = RecordingApi(translate_body="[]")
    request = TranslationRequest(texts=["one"], source_lang="en", target_lang="de")

    assert _run(api, lambda translator: translator.translate_texts(request)) == []


def test_malformed_translate_payload_is_invalid_response():
    api = RecordingApi(translate_body='[{"detectedLanguage": {}}]')
    request = TranslationRequest(texts=["one"], source_lang="en", target_lang="de")

    with pytest.raises(ExpiredOrInvalidResponse):
        _run(api, lambda translator: translator.translate_texts(request))


def test_break_sentences_truncates_input_and_returns_lengths():
    api = RecordingApi(sentence_lengths=[3, 5, 2])

    result = _run(api, lambda translator: translator.break_sentences("a" * 50, "en"), max_request_size=20)

    assert result == [3, 5, 2]
    route, query, payload, _ = api.calls[0]
    assert route == "breaksentence"
    assert query == {"api-version": "3.0", "language": "en"}
    assert payload == [{"Text": "a" * 20}]


def test_break_sentences_skips_blank_text():
    api = RecordingApi()
    assert _run(api, lambda translator: translator.break_sentences("  \n ", "en")) is None
    assert api.calls == []


def test_subscription_key_is_required():
    with pytest.raises(MissingCredentialsError):
        AzureTranslator(subscription_key="")


def test_timeout_becomes_remote_error_without_status():
    api = RecordingApi(delay=1.0)
    request = TranslationRequest(texts=["one"], source_lang="en", target_lang="de")

    with pytest.raises(RemoteTranslationError) as info:
        _run(api, lambda translator: translator.translate_texts(request), timeout=0.2)

    assert info.value.status is None


def test_unreachable_endpoint_becomes_remote_error_without_status():
    translator = AzureTranslator(subscription_key="secret", endpoint="http://127.0.0.1:1")
    request = TranslationRequest(texts=["one"], source_lang="en", target_lang="de")

    async def main():
        try:
            return await translator.translate_texts(request)
        finally:
            await translator.close()

    with pytest.raises(RemoteTranslationError) as info:
        asyncio.run(main())

    assert info.value.status is None


def test_timeout_during_html_chunks_keeps_partial_document():
    api = RecordingApi(delay=1.0, slow_after=1)
    sections = "".join(f"<section>part {i} {'t' * 2000}</section>" for i in range(4))
    html = f"<html><body>{sections}</body></html>"

    async def scenario(translator):
        orchestrator = TranslationOrchestrator(TranslationService(translator))
        return await orchestrator.translate_html_document(html, "en", "de")

    result = _run(api, scenario, timeout=0.2)

    assert isinstance(result.error, RemoteTranslationError)
    assert result.error.status is None
    assert (result.translated_chunks, result.total_chunks) == (1, 4)
    assert "<section>de:part 0" in result.html
    assert "<section>part 1" in result.html
