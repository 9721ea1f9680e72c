from datetime import date
from typing import Annotated

from fastapi import Depends, Request

from app.services.availability import AvailabilityService
from app.services.dispatcher import CommandDispatcher


def get_availability_service(request: Request) -> AvailabilityService:
    return request.app.state.availability_service


def get_command_dispatcher(request: Request) -> CommandDispatcher:
    return request.app.state.command_dispatcher


AvailabilityDep = Annotated[AvailabilityService, Depends(get_availability_service)]
DispatcherDep = Annotated[CommandDispatcher, Depends(get_command_dispatcher)]


def get_today(request: Request) -> date:
    return request.app.state.clock()


TodayDep = Annotated[date, Depends(get_today)]
