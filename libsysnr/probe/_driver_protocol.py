from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence


class ProbeDriverProtocol(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def fetch_values(
        self,
        kernel_header_arch: str,
        symbols: Sequence[str],
        includes: Sequence[str],
        defaults: Mapping[str, int],
    ) -> list[str]:
        """Resolve values of given symbols against kernel headers of given architecture.

        Returned values are decimal integer strings in same order (and count) as symbols.
        Values are rendered as unsigned 64-bit integers, so negative defaults wraps around.

        :param kernel_header_arch: Kernel source tree `arch/` subdirectory
        :param symbols: Symbols (macros) to read values of
        :param includes: Headers to include before reading symbols
        :param defaults: Values for symbols which are not defined by headers
        """
        ...

    @classmethod
    @abstractmethod
    def is_installed(cls) -> bool:
        """Is that probe driver usable on that system?."""
        ...
