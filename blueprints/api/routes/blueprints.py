"""Blueprint Routes — secured and public routers over BlueprintService.

Invariants:
    - Secured router (/api/v1/blueprints): reads need blueprints.read,
      writes need blueprints.write
    - Public router (/api/v1/public/blueprints): same operations, no auth;
      mounted by main.py only when PUBLIC_API_ENABLED
    - Status codes: read 200, create 201, point append 202, update/delete 200;
      domain errors handled globally (404 NotFound, 400 AlreadyExists)
    - Reads return filtered blueprints; create/update echo the stored value

Design Decisions:
    - One builder for both routers: the two surfaces cannot drift apart
"""

from typing import Sequence

from fastapi import APIRouter, Depends, status
from fastapi.params import Depends as DependsParam

from blueprints.api.dependencies import get_blueprint_service, require_scopes
from blueprints.core.domain_types import Scope
from blueprints.schemas.blueprint import (
    ApiResponse, BlueprintOut, BlueprintWrite, PointSchema,
)
from blueprints.services.blueprint_service import BlueprintService


def build_router(
    prefix: str,
    tags: list[str],
    read_dependencies: Sequence[DependsParam] = (),
    write_dependencies: Sequence[DependsParam] = (),
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=tags)
    read_deps = list(read_dependencies)
    write_deps = list(write_dependencies)

    @router.get(
        "", response_model=ApiResponse[list[BlueprintOut]],
        dependencies=read_deps,
    )
    async def get_all_blueprints(
        service: BlueprintService = Depends(get_blueprint_service),
    ):
        """All blueprints, filtered. Empty store -> empty list."""
        blueprints = await service.get_all()
        return ApiResponse(
            code=status.HTTP_200_OK, message="execute ok",
            data=[BlueprintOut.from_domain(bp) for bp in blueprints],
        )

    @router.get(
        "/{author}", response_model=ApiResponse[list[BlueprintOut]],
        dependencies=read_deps,
    )
    async def get_blueprints_by_author(
        author: str,
        service: BlueprintService = Depends(get_blueprint_service),
    ):
        """An author's blueprints, filtered. 404 if the author has none."""
        blueprints = await service.get_by_author(author)
        return ApiResponse(
            code=status.HTTP_200_OK, message="execute ok",
            data=[BlueprintOut.from_domain(bp) for bp in blueprints],
        )

    @router.get(
        "/{author}/{bpname}", response_model=ApiResponse[BlueprintOut],
        dependencies=read_deps,
    )
    async def get_blueprint(
        author: str,
        bpname: str,
        service: BlueprintService = Depends(get_blueprint_service),
    ):
        blueprint = await service.get(author, bpname)
        return ApiResponse(
            code=status.HTTP_200_OK, message="execute ok",
            data=BlueprintOut.from_domain(blueprint),
        )

    @router.post(
        "", response_model=ApiResponse[BlueprintOut],
        status_code=status.HTTP_201_CREATED, dependencies=write_deps,
    )
    async def create_blueprint(
        body: BlueprintWrite,
        service: BlueprintService = Depends(get_blueprint_service),
    ):
        blueprint = await service.add_new(body.to_domain())
        return ApiResponse(
            code=status.HTTP_201_CREATED, message="created",
            data=BlueprintOut.from_domain(blueprint),
        )

    @router.put(
        "/{author}/{bpname}/points", response_model=ApiResponse,
        status_code=status.HTTP_202_ACCEPTED, dependencies=write_deps,
    )
    async def add_point(
        author: str,
        bpname: str,
        point: PointSchema,
        service: BlueprintService = Depends(get_blueprint_service),
    ):
        await service.add_point(author, bpname, point.x, point.y)
        return ApiResponse(code=status.HTTP_202_ACCEPTED, message="point added")

    @router.put(
        "/{author}/{bpname}", response_model=ApiResponse[BlueprintOut],
        dependencies=write_deps,
    )
    async def update_blueprint(
        author: str,
        bpname: str,
        body: BlueprintWrite,
        service: BlueprintService = Depends(get_blueprint_service),
    ):
        """Replace points, or rename when the body's author/name differ."""
        blueprint = await service.update(author, bpname, body.to_domain())
        return ApiResponse(
            code=status.HTTP_200_OK, message="updated",
            data=BlueprintOut.from_domain(blueprint),
        )

    @router.delete(
        "/{author}/{bpname}", response_model=ApiResponse,
        dependencies=write_deps,
    )
    async def delete_blueprint(
        author: str,
        bpname: str,
        service: BlueprintService = Depends(get_blueprint_service),
    ):
        await service.delete(author, bpname)
        return ApiResponse(code=status.HTTP_200_OK, message="deleted")

    return router


router = build_router(
    "/api/v1/blueprints", ["blueprints"],
    read_dependencies=[Depends(require_scopes(Scope.READ))],
    write_dependencies=[Depends(require_scopes(Scope.WRITE))],
)

public_router = build_router(
    "/api/v1/public/blueprints", ["public-blueprints"],
)
