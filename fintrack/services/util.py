from fintrack.services.manager import service_manager


async def teardown_services() -> None:
    await service_manager.teardown()
