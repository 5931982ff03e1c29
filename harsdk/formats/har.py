"""Pydantic models for the subset of HAR 1.2 the SDK generator reads.

Only the fields used for type inference and endpoint templating are modelled;
everything else in the capture (timings, cookies, cache, pages) is ignored.
Models are frozen: a loaded capture is never mutated during a run.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class _HarModel(BaseModel):
    model_config = {"populate_by_name": True, "frozen": True}


class HarHeader(_HarModel):
    name: str
    value: str = ""


class HarPostData(_HarModel):
    mime_type: str | None = Field(default=None, alias="mimeType")
    text: str | None = None


class HarRequest(_HarModel):
    method: str = "GET"
    url: str = ""
    headers: list[HarHeader] = Field(default_factory=list)
    post_data: HarPostData | None = Field(default=None, alias="postData")


class HarContent(_HarModel):
    mime_type: str | None = Field(default=None, alias="mimeType")
    text: str | None = None
    encoding: str | None = None


class HarResponse(_HarModel):
    status: int = 0
    headers: list[HarHeader] = Field(default_factory=list)
    content: HarContent | None = None


class HarEntry(_HarModel):
    request: HarRequest
    response: HarResponse = Field(default_factory=HarResponse)


class HarLog(_HarModel):
    version: str | None = None
    entries: list[HarEntry] = Field(default_factory=list)


class HarFile(_HarModel):
    log: HarLog = Field(default_factory=HarLog)
