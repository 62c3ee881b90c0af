"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

import httpx
from fastapi import Depends, Request
from psycopg_pool import ConnectionPool

from src.adapters.company.rest import HttpCompanyProvisioner
from src.adapters.repository.postgres import PostgresUserStore
from src.config.settings import Settings, get_settings
from src.domain.queries import UserQueryService
from src.domain.registration import RegistrationService


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_http_client(request: Request) -> httpx.Client:
    """Get the shared outbound HTTP client from app state."""
    return request.app.state.http_client


def get_user_store(
    request: Request, settings: Settings = Depends(get_settings)
) -> PostgresUserStore:
    """Create user store with connection pool from app state."""
    pool = get_pool(request)
    return PostgresUserStore(pool, timeout=settings.request_timeout_seconds)


def get_company_provisioner(
    request: Request, settings: Settings = Depends(get_settings)
) -> HttpCompanyProvisioner:
    """Create company provisioner on the shared HTTP client."""
    return HttpCompanyProvisioner(
        get_http_client(request),
        settings.company_service_url,
        timeout=settings.request_timeout_seconds,
    )


def get_registration_service(
    store: PostgresUserStore = Depends(get_user_store),
    provisioner: HttpCompanyProvisioner = Depends(get_company_provisioner),
    settings: Settings = Depends(get_settings),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the user store and company provisioner for the domain service.
    """
    return RegistrationService(
        store=store,
        provisioner=provisioner,
        reject_on_lookup_failure=settings.reject_on_lookup_failure,
    )


def get_user_query_service(
    store: PostgresUserStore = Depends(get_user_store),
) -> UserQueryService:
    """Create read-only user query service."""
    return UserQueryService(store=store)
