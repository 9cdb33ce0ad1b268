"""
Request models for the Less MCP tools.

Each tool validates its arguments against one of these models before
anything is executed. The JSON schema of the model is what MCP clients
see as the tool's input schema.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


Language = Literal["js", "ts", "py"]
HttpVerb = Literal["get", "post", "put", "patch", "delete"]

LANGUAGE_DESCRIPTION = "Required: The programming language to use for the code."


class ToolRequest(BaseModel):
    """Base class for tool requests. Unknown arguments are rejected."""

    model_config = ConfigDict(extra="forbid")


# =====================
# Project Management
# =====================


class ListProjectsRequest(ToolRequest):
    pass


class ListProjectResourcesRequest(ToolRequest):
    project_id: str = Field(description="Required: The project ID to list resources for.")


class DeployProjectRequest(ToolRequest):
    project_name: str = Field(description="Required: The name of the project to deploy.")
    organization: Optional[str] = Field(
        default=None,
        description="Optional: Organization ID to deploy the project under.",
    )


class DeleteProjectRequest(ToolRequest):
    project_name: str = Field(description="Required: The name of the project to delete.")


class BuildProjectRequest(ToolRequest):
    project_name: str = Field(description="Required: The name of the project to build.")


class RunProjectRequest(ToolRequest):
    project_name: str = Field(description="Required: The name of the project to run.")


class ViewLogsRequest(ToolRequest):
    project_name: str = Field(
        description="Required: The name of the project to view logs for."
    )
    function_name: str = Field(
        description="Required: The function to view logs for (e.g., 'apis/demo/hello/get')."
    )


# =====================
# Resource Creation
# =====================


class CreateRouteRequest(ToolRequest):
    name: str = Field(
        description='Required: The name of the API to create the route for. (E.g. "store_api")'
    )
    path: str = Field(
        description='Required: The HTTP route path to create. (E.g. "/orders/{order_id}")'
    )
    language: Language = Field(description=LANGUAGE_DESCRIPTION)
    verb: HttpVerb = Field(description="Required: The HTTP verb to use for the route.")


class CreateSocketRequest(ToolRequest):
    name: str = Field(
        description=(
            "Required: The name of the Web Socket to create or to add channels to. "
            '(E.g. "realtime_chat")'
        )
    )
    language: Language = Field(description=LANGUAGE_DESCRIPTION)
    channels: Optional[list[str]] = Field(
        default=None,
        description=(
            "Optional: A list of channels to create, allowing clients to send "
            "messages to the server."
        ),
    )


class CreateTopicRequest(ToolRequest):
    name: str = Field(
        description=(
            "Required: The name of the Topic to create or to add Subscribers to. "
            '(E.g. "user_created")'
        )
    )
    language: Language = Field(description=LANGUAGE_DESCRIPTION)
    subscribers: list[str] = Field(
        description=(
            "Required: A list of Subscribers to create for a Topic. "
            '(E.g. "send_welcome_email", "send_event_to_webhook_listeners")'
        )
    )
    external_topic: Optional[str] = Field(
        default=None,
        description=(
            "Optional: The name of the external service to connect to. "
            '(E.g. "user_service")'
        ),
    )


class CreateSubscribersRequest(ToolRequest):
    names: list[str] = Field(
        min_length=1,
        description=(
            "Required: A list of Subscribers to create. "
            '(E.g. ["send_welcome_email", "send_event_to_webhook_listeners"])'
        ),
    )
    topic: str = Field(
        description=(
            "Required: The name of the Topic to create or subscribe to. "
            '(E.g. "user_created")'
        )
    )
    language: Language = Field(
        description="Required: The programming language to use for each subscriber's code."
    )
    external_topic: Optional[str] = Field(
        default=None,
        description=(
            "Optional: The name of the external service to subscribe to. "
            '(E.g. "user_service")'
        ),
    )


class CreateCronRequest(ToolRequest):
    name: str = Field(
        description='Required: The name of the CRON Job to create. (E.g. "generate_report")'
    )
    language: Language = Field(description=LANGUAGE_DESCRIPTION)


class CreateSharedModuleRequest(ToolRequest):
    name: str = Field(
        description='Required: The name of the Module to create. (E.g. "orm_models")'
    )
    language: Language = Field(description=LANGUAGE_DESCRIPTION)


class CreateCloudFunctionRequest(ToolRequest):
    name: str = Field(
        description='Required: The name of the Cloud Function to create. (E.g. "add_numbers")'
    )
    language: Language = Field(description=LANGUAGE_DESCRIPTION)
