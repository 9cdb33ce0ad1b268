"""
Operation table for the Less MCP Server.

Each entry maps a tool name to its description, request model and an
argument builder. Argument builders turn a validated request into the
Less CLI tokens that follow the base command (e.g. `npx @chuva.io/less-cli`).

Tools:
1. list-projects          - List all projects
2. list-project-resources - List resources of a project
3. deploy-project         - Deploy a project
4. delete-project         - Delete a project
5. build-project          - Build a project for offline development
6. run-project            - Run a project locally
7. view-logs              - List logs of a project function
8. create-route           - Create an HTTP route
9. create-socket          - Create a WebSocket and channels
10. create-topic          - Create a Topic and Subscribers
11. create-subscribers    - Create Subscribers to a Topic
12. create-cron           - Create a CRON Job
13. create-shared-module  - Create a Shared Code Module
14. create-cloud-function - Create a Cloud Function
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable

from pydantic import BaseModel

from .schemas import (
    BuildProjectRequest,
    CreateCloudFunctionRequest,
    CreateCronRequest,
    CreateRouteRequest,
    CreateSharedModuleRequest,
    CreateSocketRequest,
    CreateSubscribersRequest,
    CreateTopicRequest,
    DeleteProjectRequest,
    DeployProjectRequest,
    ListProjectResourcesRequest,
    ListProjectsRequest,
    RunProjectRequest,
    ViewLogsRequest,
)


@dataclass(frozen=True)
class OperationDescriptor:
    """Declared name, description, parameter schema and argument builder of a tool."""

    name: str
    description: str
    request_model: type[BaseModel]
    build_args: Callable[[Any], list[str]]

    def parameters_schema(self) -> dict[str, Any]:
        """JSON schema of the tool parameters."""
        return self.request_model.model_json_schema()


# --- Argument Builders ---


def _list_projects(request: ListProjectsRequest) -> list[str]:
    return ["list"]


def _list_project_resources(request: ListProjectResourcesRequest) -> list[str]:
    return ["list", "resources", request.project_id]


def _deploy_project(request: DeployProjectRequest) -> list[str]:
    args = ["deploy"]
    if request.organization:
        args.extend(["--organization", request.organization])
    args.append(request.project_name)
    return args


def _delete_project(request: DeleteProjectRequest) -> list[str]:
    return ["delete", request.project_name]


def _build_project(request: BuildProjectRequest) -> list[str]:
    return ["build", request.project_name]


def _run_project(request: RunProjectRequest) -> list[str]:
    return ["run", request.project_name]


def _view_logs(request: ViewLogsRequest) -> list[str]:
    return ["log", "--project", request.project_name, "--function", request.function_name]


def _create_route(request: CreateRouteRequest) -> list[str]:
    return [
        "create", "route",
        "-n", request.name,
        "-p", request.path,
        "-l", request.language,
        "-v", request.verb,
    ]


def _create_socket(request: CreateSocketRequest) -> list[str]:
    args = ["create", "socket", "-n", request.name, "-l", request.language]
    if request.channels:
        args.extend(["-c", *request.channels])
    return args


def _create_topic(request: CreateTopicRequest) -> list[str]:
    args = ["create", "topic", "-n", request.name, "-l", request.language]
    if request.subscribers:
        args.extend(["-s", *request.subscribers])
    if request.external_topic:
        args.extend(["-ex", request.external_topic])
    return args


def _create_subscribers(request: CreateSubscribersRequest) -> list[str]:
    args = [
        "create", "subscribers",
        "-n", *request.names,
        "-t", request.topic,
        "-l", request.language,
    ]
    if request.external_topic:
        args.extend(["-ex", request.external_topic])
    return args


def _create_cron(request: CreateCronRequest) -> list[str]:
    return ["create", "cron", "-n", request.name, "-l", request.language]


def _create_shared_module(request: CreateSharedModuleRequest) -> list[str]:
    return ["create", "shared-module", "-n", request.name, "-l", request.language]


def _create_cloud_function(request: CreateCloudFunctionRequest) -> list[str]:
    return ["create", "cloud-function", "-n", request.name, "-l", request.language]


# --- Operation Table ---

_DESCRIPTORS = [
    # Project management
    OperationDescriptor(
        name="list-projects",
        description="List all projects.",
        request_model=ListProjectsRequest,
        build_args=_list_projects,
    ),
    OperationDescriptor(
        name="list-project-resources",
        description="List resources by project_id.",
        request_model=ListProjectResourcesRequest,
        build_args=_list_project_resources,
    ),
    OperationDescriptor(
        name="deploy-project",
        description="Deploy your Less project.",
        request_model=DeployProjectRequest,
        build_args=_deploy_project,
    ),
    OperationDescriptor(
        name="delete-project",
        description="Delete a Less project.",
        request_model=DeleteProjectRequest,
        build_args=_delete_project,
    ),
    OperationDescriptor(
        name="build-project",
        description="Build your Less project locally for offline development.",
        request_model=BuildProjectRequest,
        build_args=_build_project,
    ),
    OperationDescriptor(
        name="run-project",
        description="Run your Less project locally.",
        request_model=RunProjectRequest,
        build_args=_run_project,
    ),
    OperationDescriptor(
        name="view-logs",
        description="List logs by project.",
        request_model=ViewLogsRequest,
        build_args=_view_logs,
    ),
    # Resource creation
    OperationDescriptor(
        name="create-route",
        description="Create a new HTTP route for a Less API",
        request_model=CreateRouteRequest,
        build_args=_create_route,
    ),
    OperationDescriptor(
        name="create-socket",
        description="Create WebSockets and socket channels",
        request_model=CreateSocketRequest,
        build_args=_create_socket,
    ),
    OperationDescriptor(
        name="create-topic",
        description="Create Topics and Subscribers",
        request_model=CreateTopicRequest,
        build_args=_create_topic,
    ),
    OperationDescriptor(
        name="create-subscribers",
        description="Create Subscribers to Topics",
        request_model=CreateSubscribersRequest,
        build_args=_create_subscribers,
    ),
    OperationDescriptor(
        name="create-cron",
        description="Create CRON Jobs",
        request_model=CreateCronRequest,
        build_args=_create_cron,
    ),
    OperationDescriptor(
        name="create-shared-module",
        description="Create Shared Code Modules",
        request_model=CreateSharedModuleRequest,
        build_args=_create_shared_module,
    ),
    OperationDescriptor(
        name="create-cloud-function",
        description="Create Cloud Functions",
        request_model=CreateCloudFunctionRequest,
        build_args=_create_cloud_function,
    ),
]

OPERATIONS: Mapping[str, OperationDescriptor] = MappingProxyType({
    descriptor.name: descriptor for descriptor in _DESCRIPTORS
})
