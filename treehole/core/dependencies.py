"""
FastAPI dependencies giving request handlers access to the services
"""
from fastapi import Request

from treehole.services.message_service import MessageService


def get_message_service(request: Request) -> MessageService:
    """
    Dependency returning the MessageService built by create_app()

    Example:
        @router.get("/messages")
        def list_messages(service: MessageService = Depends(get_message_service)):
            return service.list_messages()
    """
    return request.app.state.message_service
