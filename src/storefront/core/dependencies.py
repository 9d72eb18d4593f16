from typing import Any, Callable, Dict, Type, TypeVar

from flask import current_app

T = TypeVar('T')

Builder = Callable[["ServiceContainer"], Any]


class ServiceContainer:
    """
    Services of one Flask app, keyed by class.

    Ready-made objects go in with provide(). provide_lazy() takes a builder
    that receives the container, so a service can pull in the others it
    needs; the builder runs on first lookup and its result is reused.
    """

    def __init__(self):
        self._built: Dict[type, Any] = {}
        self._builders: Dict[type, Builder] = {}

    def provide(self, service_class: Type[T], instance: T) -> None:
        self._built[service_class] = instance

    def provide_lazy(self, service_class: Type[T], builder: Builder) -> None:
        self._builders[service_class] = builder
        self._built.pop(service_class, None)

    def __contains__(self, service_class: type) -> bool:
        return service_class in self._built or service_class in self._builders

    def get(self, service_class: Type[T]) -> T:
        if service_class not in self._built:
            builder = self._builders.get(service_class)
            if builder is None:
                raise LookupError(f"No {service_class.__name__} in this app's container")
            self._built[service_class] = builder(self)
        return self._built[service_class]


def get_container() -> ServiceContainer:
    """Container of the Flask app handling the current request"""
    return current_app.extensions["container"]


def resolve(service_class: Type[T]) -> T:
    return get_container().get(service_class)
