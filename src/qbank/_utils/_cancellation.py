import asyncio
from typing import Any, Dict, Hashable, Optional

CancelToken = Hashable


class AbortSignal:
    """Observable side of an abort handle.

    The engine waits on the signal while the transport call is in flight and
    abandons the call once it fires.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.reason: Optional[Any] = None

    @property
    def aborted(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        await self._event.wait()

    def _abort(self, reason: Optional[Any] = None) -> None:
        if self.aborted:
            return
        self.reason = reason if reason is not None else "The request was aborted"
        self._event.set()

    @classmethod
    def timeout(cls, seconds: float) -> "AbortSignal":
        """Return a signal that aborts itself after ``seconds``.

        Must be called from a running event loop.
        """
        signal = cls()
        asyncio.get_running_loop().call_later(
            seconds, signal._abort, f"Timed out after {seconds}s"
        )
        return signal


class AbortController:
    def __init__(self) -> None:
        self.signal = AbortSignal()

    def abort(self, reason: Optional[Any] = None) -> None:
        self.signal._abort(reason)


class CancellationRegistry:
    """Maps cancellation tokens to the abort handle of their in-flight call.

    A token has at most one live handle, shared by every call that uses the
    token while it lives. ``cancel`` and ``release`` both drop the handle, so
    the next ``signal_for`` with the same token starts fresh.
    """

    def __init__(self) -> None:
        self._controllers: Dict[CancelToken, AbortController] = {}

    def signal_for(self, token: CancelToken) -> AbortSignal:
        controller = self._controllers.get(token)
        if controller is None:
            controller = AbortController()
            self._controllers[token] = controller
        return controller.signal

    def cancel(self, token: CancelToken, reason: Optional[Any] = None) -> None:
        controller = self._controllers.pop(token, None)
        if controller is not None:
            controller.abort(reason)

    def release(self, token: CancelToken, signal: Optional[AbortSignal] = None) -> None:
        """Drop the handle of ``token`` without aborting it.

        When ``signal`` is given the handle is only dropped if it still owns
        that signal, so a finished call never removes a newer call's handle.
        """
        controller = self._controllers.get(token)
        if controller is None:
            return
        if signal is None or controller.signal is signal:
            del self._controllers[token]

    def clear(self) -> None:
        self._controllers.clear()

    def __contains__(self, token: object) -> bool:
        return token in self._controllers

    def __len__(self) -> int:
        return len(self._controllers)
