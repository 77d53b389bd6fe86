"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application services
- Application services don't depend on adapters or the HTTP stack
- Adapters can depend on domain
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("journey_planner.domain.models*")
        .should_not_import("journey_planner.adapters*")
        .should_not_import("journey_planner.application*")
        .should_not_import("journey_planner.domain.contracts*")
        .should_not_import("journey_planner.domain.ports*")
        .may_import("journey_planner.domain.models*")
        .check("journey_planner")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols/interfaces) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("journey_planner.domain.contracts*")
        .should_not_import("journey_planner.adapters*")
        .should_not_import("journey_planner.application*")
        .may_import("journey_planner.domain*")
        .check("journey_planner")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("journey_planner.domain.ports*")
        .should_not_import("journey_planner.adapters*")
        .should_not_import("journey_planner.application*")
        .may_import("journey_planner.domain*")
        .check("journey_planner")
    )


def test_domain_does_not_import_http_stack() -> None:
    """The domain layer should not know about aiohttp."""
    (
        archrule("domain transport", comment="Domain should not depend on the HTTP client")
        .match("journey_planner.domain*")
        .should_not_import("aiohttp*")
        .check("journey_planner")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("journey_planner.application*")
        .should_not_import("journey_planner.adapters*")
        .should_not_import("journey_planner.cli")
        .should_not_import("aiohttp*")
        .may_import("journey_planner.domain*")
        .may_import("journey_planner.application*")
        .check("journey_planner")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("journey_planner.adapters*")
        .should_not_import("journey_planner.application*")
        .should_not_import("journey_planner.cli")
        .may_import("journey_planner.domain*")
        .may_import("journey_planner.adapters*")
        .check("journey_planner", only_direct_imports=True)
    )
