"""Path parameter types shared by the resource routers."""

from typing import Annotated

from fastapi import Path

from minicommerce_api.core.models.io.common import MAX_ID

IdPath = Annotated[int, Path(le=MAX_ID, description="Resource identifier")]
