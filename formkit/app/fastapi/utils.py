import asyncio
import concurrent.futures

from formkit.fk_logger import logger


def run_sync(coroutine):
    """
    Runs an asynchronous coroutine in a separate thread and waits for its result.
    It is useful for running async functions in a synchronous
    environment, e.g. inside widget callbacks.

    This method creates a new thread using ThreadPoolExecutor and executes the coroutine
    inside a new event loop.

    :param coroutine: coroutine to run
    :return: result of coroutine
    """
    try:
        with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
            result = executor.submit(
                lambda coroutine_to_exec: asyncio.run(coroutine_to_exec), coroutine
            ).result()
        return result
    except RuntimeError as ex:
        logger.warning(repr(ex))
        return None
