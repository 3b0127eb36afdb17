"""End-to-end resolution of user paths to kernel namespace paths."""

import asyncio
import dataclasses
import logging

from kernelpath.canonicalize_win32 import canonicalize_win32
from kernelpath.classify import classify
from kernelpath.code_units import from_text
from kernelpath.current_directory import CurrentDirectoryState, set_current_directory
from kernelpath.device_names import find_device_candidate, resolve_device_name
from kernelpath.existence import (
    AsyncExistsPredicate,
    ExistsPredicate,
    assume_exists,
    check_exists,
    check_exists_async,
    directory_exists,
)
from kernelpath.parsed_path import ParsedPath
from kernelpath.policies import DeviceNamePolicy
from kernelpath.resolution_result import ResolutionResult
from kernelpath.resolve_relative import resolve_relative
from kernelpath.resolver_config import ResolverConfig
from kernelpath.root_kind import Namespace, RelativeForm, RootKind
from kernelpath.to_kernel_path import to_kernel_path
from kernelpath.to_win32_string import root_length
from kernelpath.user_path import clean_path, to_user_path

logger = logging.getLogger(__name__)


class KernelPathResolver:
    """Resolves raw user paths using one configuration and current directory state."""

    def __init__(
        self,
        config: ResolverConfig | None = None,
        state: CurrentDirectoryState | None = None,
        exists: ExistsPredicate = directory_exists,
        async_exists: AsyncExistsPredicate | None = None,
    ) -> None:
        """Initialize the resolver.

        Without an explicit `state`, one is seeded from the config's
        `current_directory` and `drive_directories`. Seeding validates the
        roots but does not check existence.
        """
        self.config = config or ResolverConfig()
        self.exists = exists
        self.async_exists = async_exists or exists
        self.state = state or self._seed_state()

    def _seed_state(self) -> CurrentDirectoryState:
        state = CurrentDirectoryState(classify(from_text(self.config.current_directory)))
        for letter, directory in sorted(self.config.drive_directories.items()):
            set_current_directory(
                state,
                classify(from_text(directory)),
                letter,
                exists=assume_exists,
                extended_length=self.config.extended_length,
            )
        return state

    def _exists(self, path: str) -> bool:
        return check_exists(self.exists, path, self.config.existence_timeout)

    def resolve(self, raw: str) -> ResolutionResult:
        """Resolve `raw` to its kernel path.

        Raises InvalidRoot, PathTooLong or AmbiguousDriveStream.
        """
        parsed, path = self._resolve_structure(raw)
        path = resolve_device_name(path, self.config.device_policy, self._exists)
        return self._finish(raw, parsed, path)

    async def resolve_async(self, raw: str) -> ResolutionResult:
        """Resolve `raw`, awaiting the existence predicate if one is needed.

        The structural steps read the current directory under its lock, so
        they run on a worker thread to keep the event loop free.
        """
        parsed, path = await asyncio.to_thread(self._resolve_structure, raw)
        policy = self.config.device_policy
        present = False
        candidate = find_device_candidate(path, policy)
        if (
            candidate is not None
            and candidate.parent is not None
            and policy is DeviceNamePolicy.MODERN
        ):
            present = await check_exists_async(
                self.async_exists, candidate.parent, self.config.existence_timeout
            )
        path = resolve_device_name(path, policy, lambda _: present)
        return self._finish(raw, parsed, path)

    def set_current_directory(self, raw: str, drive: str | None = None) -> ParsedPath:
        """Set the process (or per-drive) current directory from a raw path."""
        return set_current_directory(
            self.state,
            classify(from_text(raw)),
            drive,
            exists=self._exists,
            extended_length=self.config.extended_length,
        )

    def clean(self, raw: str) -> str:
        """Clean `raw` without resolving it."""
        return clean_path(from_text(raw))

    def to_user_path(self, raw: str) -> str:
        """Convert a verbatim path to its Win32 form where that is lossless."""
        return to_user_path(from_text(raw), extended_length=self.config.extended_length)

    def _resolve_structure(self, raw: str) -> tuple[ParsedPath, ParsedPath]:
        """Classify, canonicalize and make absolute, stopping before drive device checks."""
        parsed = classify(from_text(raw))
        if parsed.namespace is Namespace.NT:
            return parsed, parsed

        if parsed.is_absolute:
            components = canonicalize_win32(
                parsed.components,
                is_final_component_filename=not parsed.trailing_separator,
                root_length=root_length(parsed.root),
                extended_length=self.config.extended_length,
            )
            path = dataclasses.replace(
                parsed,
                components=tuple(components),
                trailing_separator=parsed.trailing_separator and bool(components),
            )
            return parsed, path

        if parsed.relative_form is RelativeForm.PATH:
            # A bare device name is matched before joining the current directory.
            local = canonicalize_win32(
                parsed.components,
                is_final_component_filename=not parsed.trailing_separator,
                extended_length=True,
                keep_leading_parents=True,
            )
            device = resolve_device_name(
                parsed.with_components(local), self.config.device_policy, self._exists
            )
            if device.root.kind is RootKind.DEVICE_NS:
                return parsed, device

        path = resolve_relative(
            parsed,
            self.state,
            strictness=self.config.drive_stream_strictness,
            extended_length=self.config.extended_length,
        )
        return parsed, path

    def _finish(self, raw: str, parsed: ParsedPath, path: ParsedPath) -> ResolutionResult:
        kernel_path = to_kernel_path(path)
        device_name = None
        if path.root.kind is RootKind.DEVICE_NS and parsed.root.kind is not RootKind.DEVICE_NS:
            device_name = path.components[0]
        logger.debug("Resolved %r -> %r", raw, kernel_path)
        return ResolutionResult(
            raw=raw,
            path=path,
            kernel_path=kernel_path,
            relative_form=parsed.relative_form,
            device_name=device_name,
            deferred_parent=path.deferred_parent,
        )


def resolve_kernel_path(
    raw: str,
    config: ResolverConfig | None = None,
    state: CurrentDirectoryState | None = None,
    exists: ExistsPredicate = directory_exists,
) -> str:
    """Resolve `raw` with a one-off resolver and return only the kernel path."""
    return KernelPathResolver(config, state, exists).resolve(raw).kernel_path
