import datetime
import importlib.util
import os
import sys
import types

import aiohttp


def import_module_from_path(module_name: str, file_path: str) -> types.ModuleType:
    abs_file_path = os.path.abspath(file_path)
    spec = importlib.util.spec_from_file_location(module_name, abs_file_path)
    if spec is None or spec.loader is None:
        raise ImportError(
            f"failed to generate module spec for module named '{module_name}' at '{abs_file_path}'"
        )
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except FileNotFoundError as fnf:
        raise ImportError(
            f"failed to find code for module named '{module_name}' at '{abs_file_path}'"
        ) from fnf
    return module


def generate_timestamp() -> str:
    """Return the current UTC time as an ISO 8601 string with millisecond
    precision, e.g. `2022-06-01T12:30:00.000Z`.
    """
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


async def upload_file(
    session: aiohttp.ClientSession, host_url: str, file: bytes, filename: str
) -> str:
    """Upload the given bytes to an attachment host.

    Args:
        session (aiohttp.ClientSession): The HTTP session to send the request with.
        host_url (str): The base URL of the attachment host.
        file (bytes): The file contents to upload.
        filename (str): The file name the file will be uploaded with.

    Returns:
        str: The ID of the hosted attachment.

    Raises:
        aiohttp.ClientError: The request failed or the host responded with an
          error status.
    """
    data = aiohttp.FormData()
    data.add_field("file", file, filename=filename)

    async with session.post(f"{host_url.rstrip('/')}/attachments", data=data) as resp:
        resp.raise_for_status()
        payload = await resp.json()

    return str(payload["id"])
