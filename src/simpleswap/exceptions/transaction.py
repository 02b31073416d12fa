from typing import Any

from eth_typing import ChecksumAddress

from simpleswap.exceptions.base import SimpleSwapError

"""
Exceptions defined here are raised by the guards on pool entry points.
"""


class TransactionError(SimpleSwapError):
    """
    Exception raised when a pool entry point rejects or aborts a call.
    """


class DeadlineExpired(TransactionError):
    def __init__(self, deadline: int, timestamp: int) -> None:
        """
        The call deadline passed before the call was executed.
        """

        self.deadline = deadline
        self.timestamp = timestamp
        super().__init__(message=f"Deadline {deadline} expired at timestamp {timestamp}.")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.deadline, self.timestamp)


class InvalidPath(TransactionError):
    """
    The swap path does not contain exactly two distinct assets, or a pair repeats an asset.
    """


class InvalidRecipient(TransactionError):
    def __init__(self, recipient: ChecksumAddress) -> None:
        self.recipient = recipient
        super().__init__(message=f"Invalid recipient {recipient}.")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.recipient,)


class Reentrant(TransactionError):
    """
    A state-mutating call was attempted while another one is in flight.
    """

    def __init__(self) -> None:
        super().__init__(message="Reentrant call.")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, ()


class SlippageExceeded(TransactionError):
    def __init__(self, minimum: int, received: int) -> None:
        """
        The swap output was less than the minimum.
        """

        self.minimum = minimum
        self.received = received
        super().__init__(message=f"Insufficient output: {received} received, {minimum} required.")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.minimum, self.received)


class TransferFailed(TransactionError):
    def __init__(self, asset: ChecksumAddress, amount: int) -> None:
        """
        An asset transfer capability returned a failure or raised.
        """

        self.asset = asset
        self.amount = amount
        super().__init__(message=f"Transfer of {amount} {asset} failed.")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.asset, self.amount)


class Unauthorized(TransactionError):
    def __init__(self, sender: ChecksumAddress) -> None:
        self.sender = sender
        super().__init__(message=f"{sender} is not authorized to call this method.")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.sender,)
