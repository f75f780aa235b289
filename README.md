# imgservice

A small HTTP service for simple image processing. Clients upload an image,
receive a file name for it, and then ask the service for a grayscale,
resized or blurred version of that image. Processed images come back as
`image/jpeg` response bodies.

## Installation

```
pip install .
```

## Running the server

```
imgservice
```

Options:

- `--host` – address to bind (default `0.0.0.0`)
- `--port` – port to listen on (default `8080`)
- `--media-dir` – directory where uploaded and processed images are kept
  (default `media`; it is created if missing)

The server handles requests on several threads and runs until you press
ENTER (or standard input reaches end of file) in the terminal it was
started from.

## Endpoints

### `GET` (any path)

Returns the plain-text greeting `Hello from the image server!`.

### `POST /upload`

The request body is the raw image data. The service stores it in the media
directory under a new file name made of a transaction id (`TRANX` followed
by five digits) and the suffix `upload.jpg`, for example
`TRANX48213upload.jpg`, and answers with JSON:

```
{"status":"sucess","message":"Image uploaded successfully","fileName":"TRANX48213upload.jpg"}
```

### `POST /grayscale`

Body: `{"fileName": "TRANX48213upload.jpg"}`

Returns the image converted to grayscale.

### `POST /resize`

Body: `{"fileName": "TRANX48213upload.jpg", "width": 256, "height": 256}`

Returns the image scaled to the given size.

### `POST /filter`

Body: `{"fileName": "TRANX48213upload.jpg", "filterType": "blur", "width": 5, "height": 5}`

Returns the image smoothed with a box blur of the given kernel size. `blur`
is the only filter type.

Each processed image is also written to the media directory as the part of
`fileName` before `upload` followed by `output.jpg` (for example
`TRANX48213output.jpg`), replacing any earlier result for that upload.
`width` and `height` may be integers or strings holding integers; both are
required and must be positive.

### Errors

| Status | Body | When |
| ------ | ---- | ---- |
| 500 | `Invalid Json Body` | the body is not valid JSON |
| 500 | `Missing Parameter` | the body is not a JSON object, or `fileName`, `filterType`, `width` or `height` is missing or unusable |
| 500 | `Failed to Process Image` | `fileName` is not a plain file name, or the image cannot be read, transformed or written |
| 500 | `Failed to upload the image.` | an upload cannot be stored |
| 400 | `Unsupported filter type.` | `filterType` is not `blur` |
| 404 | `Unsupported target.` | a `POST` to any other path |
| 400 | `Unsupported method.` | any method other than `GET` and `POST` |

## Using it from Python

The request handling lives in `imgservice.session.ImageService`, which can
be used without a network:

```python
from imgservice.session import ImageService

service = ImageService("media")
response = service.handle("POST", "/upload", jpeg_bytes)
print(response.status, response.content_type, response.text_body)
```

`handle` returns a `Response` with `status`, `body` and `content_type`.
`ImageService.upload(body)` and `ImageService.process(target, body)` can
also be called directly.

`imgservice.server.make_server(service, host, port)` builds a threaded HTTP
server around a service. The functions in `imgservice.processing`
(`process_gray`, `process_resize`, `process_blur`) do the image work
directly on files, return the output path and raise
`ImageProcessingError` on failure. `imgservice.ids.generate_transaction_id()`
returns a new `TRANX` identifier.

## What it does not do

There is no authentication, no listing or deletion of stored images, and no
cleanup of the media directory: uploads and results stay on disk until
removed by hand.

## Tests

```
pip install .[test]
pytest
```