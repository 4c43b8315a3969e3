# simpleoneapi

Building blocks for a gateway that puts several chat-model providers behind
one OpenAI-compatible chat completion API. The package holds the
OpenAI-style request and response types, the request and response types of
several providers, converters between the two, an async client for the
Qianfan (ERNIE) chat API, and small helpers for server-sent events, headers,
timestamps and logging.

## Installing

```
pip install .
pip install ".[test]"   # with pytest, pytest-asyncio and respx
```

## OpenAI-style types

`simpleoneapi.schema` has dataclasses for the chat completion protocol:

- `ChatCompletionRequest.from_dict(data)` decodes a request body and raises
  `ValueError` on malformed fields; unset numbers are zero. `stop` may be a
  string or a list of strings; message content given as a list of parts is
  joined from its text parts.
- `OpenAIResponse`, `Choice`, `Usage`, `ErrorDetail` for plain answers, and
  `OpenAIStreamResponse`, `StreamChoice`, `Delta` for streamed chunks. Each
  has `to_dict()`, which leaves out empty optional fields.

```python
from simpleoneapi.schema import ChatCompletionRequest

request = ChatCompletionRequest.from_dict({
    "model": "gemini-1.5-flash",
    "stream": False,
    "messages": [
        {"role": "system", "content": "You are concise."},
        {"role": "user", "content": "Hello"},
    ],
})
```

`simpleoneapi.messages.convert_system_messages_to_no_system(messages)` folds
a leading system message into the next message (joined with a newline); a
lone system message becomes a user message. The input is not changed.

## Provider converters

Each module under `simpleoneapi.adapters` turns a `ChatCompletionRequest`
into a provider request and provider answers back into OpenAI-style
responses:

| Module | Request | Responses |
|--------|---------|-----------|
| `adapters.gemini` | `openai_request_to_gemini_request` | `gemini_response_to_openai_response`, `gemini_response_to_openai_stream_response` |
| `adapters.ollama` | `openai_request_to_ollama_request` | `ollama_response_to_openai_response`, `ollama_response_to_openai_stream_response` |
| `adapters.minimax` | `openai_request_to_minimax_request` | `minimax_response_to_openai_response`, `minimax_response_to_openai_stream_response` |
| `adapters.coze` | `openai_request_to_coze_request` | `coze_response_to_openai_response`, `coze_response_to_openai_stream_response` |
| `adapters.qianfan` | `openai_request_to_qianfan_request` | `qianfan_response_to_openai_response`, `qianfan_response_to_openai_stream_response` |
| `adapters.passthrough` | — | `openai_response_to_openai_response` (a decoded OpenAI body) |

Some of the rules they apply:

- Gemini: assistant turns are sent as `model` turns and come back as
  `assistant`; `top_logprobs` is passed on as `topK`.
- MiniMax: a leading system message becomes the bot persona; the model
  `abab6-chat` always asks for 8192 tokens.
- Coze: the last message is the query and the rest the chat history; the
  user defaults to `12345678`.
- Qianfan: a leading system message becomes the `system` field;
  `top_p` is clamped to `[0, 1]`, temperature to `(0, 1]` (0.1 when not
  positive), and the frequency penalty to `[1, 2]`. `check_max_tokens` and
  `validate_max_tokens` adjust `max_tokens` to the ERNIE model family's
  limits.
- Ollama: `response_format` `json_object` becomes `json`, `text` stays
  `text`; `determine_finish_reason(done)` gives `stop` or `length`.

The provider types themselves live in `simpleoneapi.llm.gemini`,
`llm.ollama`, `llm.minimax`, `llm.coze` and `llm.qianfan_types`, with
`to_dict()` for requests and `from_dict()` for responses.

```python
from simpleoneapi.adapters.gemini import openai_request_to_gemini_request

body = openai_request_to_gemini_request(request).to_dict()
```

## Qianfan client

`simpleoneapi.llm.qianfan` talks to the Qianfan chat API with `httpx`:

```python
from simpleoneapi.adapters.qianfan import openai_request_to_qianfan_request
from simpleoneapi.llm.qianfan import qianfan_call, qianfan_call_sse

qf_request = openai_request_to_qianfan_request(request)
answer = await qianfan_call("placeholder", "secret", "ERNIE-Speed-8K", qf_request)

async for event in qianfan_call_sse("placeholder", "secret", "ERNIE-Speed-8K", qf_request):
    print(event.result)
```

`get_access_token` raises `RuntimeError` when no token is returned; a status
other than 200 raises `simpleoneapi.errors.UpstreamStatusError`. Stream
lines that do not decode are logged and skipped. `model_name_to_address`
gives the endpoint path segment of a model.

## Helpers

- `simpleoneapi.errors.check_status_code(response)` raises
  `UpstreamStatusError` (with `status_code` and `body`) for an `httpx`
  response whose status is not 200.
- `simpleoneapi.utils`: `sse_data(payload)` formats one `data: ...` event,
  `event_stream_headers()` gives the headers of an event stream,
  `api_key_from_header("Bearer token")` returns `"token"` and raises
  `ValueError` for other shapes, `parse_rfc3339nano_to_unix_time` parses
  timestamps of any fraction precision, and
  `resolve_relative_path_to_absolute` / `get_absolute_path` resolve paths.
- `simpleoneapi.logging_setup.init_log(mode)` configures the
  `simpleoneapi` logger on standard output: `dev`/`development` log from
  DEBUG, any other mode from WARNING; `prodj`, `prodjson` and
  `productionjson` write JSON lines.
- `simpleoneapi.apis.speech.create_speech_handler` is a Starlette endpoint
  that checks a speech request (`model`, `input`, `voice` required) and
  answers with a description of the audio it would make:

```python
from starlette.applications import Starlette
from starlette.routing import Route
from simpleoneapi.apis.speech import create_speech_handler

app = Starlette(routes=[Route("/v1/audio/speech", create_speech_handler, methods=["POST"])])
```

## What it does not do

The package is a library. It has no command and no running server: there is
no `/v1/chat/completions` or `/v1/models` endpoint, no loading of a
configuration file, no choice of a service per model, no load balancing,
rate or concurrency limiting, and no API-key check on incoming requests.
Apart from the Qianfan client it makes no calls to providers; sending the
converted requests to Gemini, Ollama, MiniMax, Coze or OpenAI-compatible
services is left to the caller.