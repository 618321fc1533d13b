"""
Service Container - Dependency Injection Container for components under test
Wires collaborators through constructors so tests can hand in mocks directly.
"""

from typing import Dict, Any, List, Optional, Callable
import inspect
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ServiceLifecycle(Enum):
    """Service lifecycle management options"""
    SINGLETON = "singleton"  # One instance per container
    TRANSIENT = "transient"  # New instance every time


class ServiceDefinition:
    """Definition of how a service should be created"""

    def __init__(
        self,
        name: str,
        factory: Callable,
        dependencies: List[str] = None,
        lifecycle: ServiceLifecycle = ServiceLifecycle.SINGLETON,
        config: Dict[str, Any] = None
    ):
        self.name = name
        self.factory = factory
        self.dependencies = dependencies or []
        self.lifecycle = lifecycle
        self.config = config or {}


class CircularDependencyError(Exception):
    """Raised when circular dependency is detected"""
    pass


class ServiceNotFoundError(Exception):
    """Raised when requested service is not registered"""
    pass


class ServiceContainer:
    """
    Dependency Injection Container for managing components and their collaborators.

    Features:
    - Dependency resolution by name
    - Circular dependency detection
    - Singleton and transient lifecycle management
    - External dependencies (mocks) that take priority over registrations
    """

    def __init__(self):
        self._services: Dict[str, ServiceDefinition] = {}
        self._instances: Dict[str, Any] = {}
        self._external: Dict[str, Any] = {}
        self._creating: List[str] = []

    def register(
        self,
        name: str,
        factory: Callable,
        dependencies: List[str] = None,
        lifecycle: ServiceLifecycle = ServiceLifecycle.SINGLETON,
        config: Dict[str, Any] = None
    ) -> 'ServiceContainer':
        """
        Register a service with the container.

        Args:
            name: Service name for retrieval
            factory: Class or function to create the service
            dependencies: List of service names passed positionally to the factory
            lifecycle: How the service instance should be managed
            config: Keyword arguments passed to the factory

        Returns:
            Self for method chaining
        """
        if name in self._services:
            raise ValueError(f"Service '{name}' is already registered")

        if not callable(factory):
            raise ValueError(f"Factory for '{name}' must be callable")

        self._services[name] = ServiceDefinition(
            name=name,
            factory=factory,
            dependencies=dependencies,
            lifecycle=lifecycle,
            config=config
        )
        logger.debug(f"Registered service: {name} -> {dependencies or []}")
        return self

    def set_external_dependency(self, name: str, instance: Any) -> 'ServiceContainer':
        """
        Set an external dependency that's created outside the container.
        External dependencies shadow registered services of the same name,
        which is how mocks are injected.
        """
        self._external[name] = instance
        self._instances.clear()
        logger.debug(f"Set external dependency: {name}")
        return self

    def set_external_dependencies(self, dependencies: Dict[str, Any]) -> 'ServiceContainer':
        """Set several external dependencies at once"""
        for name, instance in dependencies.items():
            self.set_external_dependency(name, instance)
        return self

    def get(self, name: str) -> Any:
        """
        Get a service instance, creating it if necessary.

        Args:
            name: Service name to retrieve

        Returns:
            Service instance

        Raises:
            ServiceNotFoundError: If service is not registered
            CircularDependencyError: If circular dependency detected
        """
        if name in self._external:
            return self._external[name]

        if name not in self._services:
            raise ServiceNotFoundError(f"Service '{name}' is not registered")

        service_def = self._services[name]

        if service_def.lifecycle == ServiceLifecycle.SINGLETON and name in self._instances:
            return self._instances[name]

        return self._create_service(name)

    def _create_service(self, name: str) -> Any:
        """
        Create a service instance with dependency injection.
        """
        if name in self._creating:
            cycle = ' -> '.join(self._creating + [name])
            raise CircularDependencyError(f"Circular dependency detected: {cycle}")

        self._creating.append(name)

        try:
            service_def = self._services[name]

            dependencies = [self.get(dep_name) for dep_name in service_def.dependencies]

            if inspect.isclass(service_def.factory) and not service_def.config:
                instance = service_def.factory(*dependencies)
            else:
                instance = service_def.factory(*dependencies, **service_def.config)

            if service_def.lifecycle == ServiceLifecycle.SINGLETON:
                self._instances[name] = instance

            return instance

        finally:
            self._creating.remove(name)

    def has_service(self, name: str) -> bool:
        """Check if a service is registered or supplied externally"""
        return name in self._services or name in self._external

    def validate_dependencies(self) -> Dict[str, List[str]]:
        """
        Validate all service dependencies can be resolved.

        Returns:
            Dictionary mapping service names to lists of missing dependencies
        """
        issues = {}

        for name, service_def in self._services.items():
            missing_deps = [dep for dep in service_def.dependencies if not self.has_service(dep)]
            if missing_deps:
                issues[name] = missing_deps

        return issues

    def clear(self) -> 'ServiceContainer':
        """Clear all services and instances (useful for testing)"""
        self._services.clear()
        self._instances.clear()
        self._external.clear()
        self._creating.clear()
        return self

    def __repr__(self) -> str:
        return (
            f"ServiceContainer(services={len(self._services)}, "
            f"external={len(self._external)}, instances={len(self._instances)})"
        )


# Global container instance
_app_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Get the global service container"""
    global _app_container
    if _app_container is None:
        _app_container = ServiceContainer()
    return _app_container


def reset_container() -> ServiceContainer:
    """Discard every registration on the global container"""
    return get_container().clear()


def configure_container(mocks: Dict[str, Any] = None) -> ServiceContainer:
    """
    Configure the global service container for a test.

    Args:
        mocks: External dependencies (usually mocks) keyed by name

    Returns:
        Configured service container
    """
    container = reset_container()

    if mocks:
        container.set_external_dependencies(mocks)

    return container
