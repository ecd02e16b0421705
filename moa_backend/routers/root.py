from fastapi import APIRouter, Depends, Request

from ..libs.logger import Logger
from ..models.api_metadata import ApiMetadata

log = Logger.get_logger(__name__)

# --------------------------------------------------------------------------- #
# Routers
# --------------------------------------------------------------------------- #

root_router = APIRouter()
"""Root API Router"""

core_router = APIRouter(
    prefix="/core",
    tags=["Core"],
)
"""Core API Router for system endpoints"""

# --------------------------------------------------------------------------- #
# Common docs components
# --------------------------------------------------------------------------- #

status_example = {"message": "API is running", "status": "OK"}

example_metadata = {
    "title": "MOA Backend API",
    "description": "Shared household finance app MOAs RESTful backend API",
    "version": "0.0.1-SNAPSHOT",
    "contact": {"name": "MOA Team", "email": "contact@moa.com"},
    "servers": [
        {"url": "http://localhost:8080", "description": "Local Server"},
        {"url": "https://api.moa.com", "description": "Production Server"},
    ],
}


def current_api_metadata(request: Request) -> ApiMetadata:
    """Metadata the running app was created with"""
    return request.app.state.api_metadata


# --------------------------------------------------------------------------- #
# Root Endpoints
# --------------------------------------------------------------------------- #


@root_router.get(
    "/",
    summary="API Root",
    description="Root endpoint of the API.",
    response_description="API status message",
    response_model=dict,
    responses={
        200: {
            "description": "API is running.",
            "content": {"application/json": {"example": status_example}},
        }
    },
    include_in_schema=False,
)
def api_root():
    """Root endpoint of the API."""
    log.debug("API Root endpoint called.")
    return {"message": "API is running", "status": "OK"}


# --------------------------------------------------------------------------- #
# Core Endpoints
# --------------------------------------------------------------------------- #


@core_router.get(
    "/healthcheck",
    summary="Healthcheck",
    description="Healthcheck endpoint to verify if service is running.",
    response_description="Status of service",
    response_model=dict,
    responses={
        200: {
            "description": "Service is running.",
            "content": {"application/json": {"example": status_example}},
        }
    },
)
def healthcheck():
    return {"message": "API is running", "status": "OK"}


@core_router.get(
    "/metadata",
    summary="API Metadata",
    description="Title, version, contact and servers of the API.",
    response_description="The API metadata descriptor",
    response_model=ApiMetadata,
    responses={
        200: {
            "description": "API metadata retrieved successfully.",
            "content": {"application/json": {"example": example_metadata}},
        }
    },
)
def api_metadata_endpoint(api_metadata: ApiMetadata = Depends(current_api_metadata)):
    """Title, version, contact and servers of the API."""
    log.debug("API Metadata endpoint called.")
    return api_metadata
