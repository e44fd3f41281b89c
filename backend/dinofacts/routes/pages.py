"""
Dinosaur Facts Backend — Static Document Route
===============================================

What:  GET / returns the bundled HTML client.
How:   FileResponse of `<static_dir>/index.html`. Other files in the static
       directory are served by the StaticFiles mount registered last in
       main.create_app(), after every API route.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from dinofacts.config import settings
from dinofacts.exceptions import NotFoundError

router = APIRouter(tags=["Pages"])


@router.get("/", include_in_schema=False)
@router.head("/", include_in_schema=False)
async def index() -> FileResponse:
    index_path = Path(settings.static_dir) / "index.html"
    if not index_path.is_file():
        raise NotFoundError(resource="file", resource_id="index.html")
    return FileResponse(path=str(index_path), media_type="text/html")
