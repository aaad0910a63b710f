from dataclasses import asdict

from fastapi import APIRouter, HTTPException, Path, Query

from firegear.catalog import EQUIPMENT_CATEGORIES, EQUIPMENT_STATUSES, get_template, templates_for
from firegear.schemas import ErrorResponse
from firegear.schemas.meta import CategoryOption, InspectionTemplateOut, StatusOption

# reference data is static; no service or database round-trip
router = APIRouter(prefix="/api")


@router.get(
    "/meta/categories",
    tags=["meta"],
    response_model=list[CategoryOption],
    summary="Equipment categories with suggested subcategories",
)
async def list_categories():
    return [
        CategoryOption(key=info.key, name=info.name, items=list(info.items))
        for info in EQUIPMENT_CATEGORIES.values()
    ]


@router.get("/meta/statuses", tags=["meta"], response_model=list[StatusOption])
async def list_statuses():
    return [StatusOption(key=key, label=label) for key, label in EQUIPMENT_STATUSES.items()]


@router.get(
    "/inspection-templates",
    tags=["inspection-templates"],
    response_model=list[InspectionTemplateOut],
    summary="Inspection template catalogue",
)
async def list_inspection_templates(
    category: str | None = Query(None, description="only templates applicable to this category"),
):
    return [InspectionTemplateOut(**asdict(t)) for t in templates_for(category)]


@router.get(
    "/inspection-templates/{template_id}",
    tags=["inspection-templates"],
    response_model=InspectionTemplateOut,
    responses={404: {"model": ErrorResponse, "description": "template not found"}},
)
async def get_inspection_template(template_id: str = Path(..., max_length=100)):
    template = get_template(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail="Inspection template not found")
    return InspectionTemplateOut(**asdict(template))
