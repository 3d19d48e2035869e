"""
Declarative Registration of Engine Objects
==========================================

Building blocks used by the ``expose_*`` functions to republish classes,
enums and functions of the wrapped engine as Python classes and module
functions, under Python names, with named/defaulted arguments and
documentation strings.

Every bound class derives from :class:`BoundObject` and holds a shared handle
(``_native``) on an engine object. Arguments are unwrapped to engine objects
on the way in and results are wrapped into bound classes on the way out.

Examples
--------
>>> m = create_module("kernel")
>>> (class_(m, "FlightConditions", engine.FlightConditions)
...     .def_init(arg("shape_model"), arg("aerodynamic_angle_calculator", None))
...     .def_property_readonly("current_altitude",
...                            engine.FlightConditions.getCurrentAltitude))
>>> def_function(m, "spherical", engine.sphericalBodyShapeSettings, arg("radius"))
"""

import functools
import inspect
import logging
import types
import weakref
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

_NO_DEFAULT = inspect.Parameter.empty
_REGISTRY_ATTRIBUTE = "__astrobind_registry__"
_BOUND_MARKER = "__astrobind_bound__"

# Results of these types are never wrapped or mapped onto enums
_PASSTHROUGH_TYPES = (bool, int, float, complex, str, bytes, np.ndarray, np.generic)


class arg:
    """
    Named argument of a bound callable.

    Parameters
    ----------
    name : str
        Python-side argument name
    default : optional
        Default value, converted to the engine representation on each call
    """
    __slots__ = ("name", "default")

    def __init__(self, name: str, default: Any = _NO_DEFAULT):
        self.name = name
        self.default = default

    @property
    def has_default(self) -> bool:
        return self.default is not _NO_DEFAULT

    def __repr__(self):
        if self.has_default:
            return f"arg({self.name!r}, default={self.default!r})"
        return f"arg({self.name!r})"


class BoundObject:
    """
    Base class of every bound wrapper class.

    Instances hold the engine object in ``_native``. Classes without a
    declared constructor can only be obtained as results of engine calls.
    """
    _native_type: Optional[type] = None
    _registry: Optional["Registry"] = None

    def __init__(self, *args, **kwargs):
        raise TypeError(f"{type(self).__name__}: No constructor defined!")

    def __repr__(self):
        native = self.__dict__.get("_native")
        return f"<{type(self).__module__}.{type(self).__qualname__} wrapping {native!r}>"


class BoundEnum(Enum):
    """Base class of bound enums; member values are the engine's values."""


class Registry:
    """
    Type registry shared by a module tree.

    Maps engine types onto bound classes and engine enum values onto bound
    enum members, and keeps one live wrapper per engine object so that the
    same engine object always comes back as the same Python object.
    """

    def __init__(self):
        self.classes: Dict[type, type] = {}
        self.enum_members: Dict[Tuple[type, Any], BoundEnum] = {}
        self._instances = weakref.WeakValueDictionary()

    # ========== REGISTRATION ==========
    def register_class(self, native_type: type, cls: type):
        if native_type in self.classes:
            logger.warning("Engine type %s re-registered as %s",
                           getattr(native_type, "__name__", native_type), cls.__qualname__)
        self.classes[native_type] = cls

    def register_enum(self, enum_cls):
        for member in enum_cls:
            self.enum_members[(type(member.value), member.value)] = member

    def remember(self, native, wrapper: BoundObject):
        """Associate an engine object with an existing wrapper."""
        self._instances[id(native)] = wrapper

    # ========== LOOKUP ==========
    def wrapper_for(self, native_type: type) -> Optional[type]:
        """Most-derived bound class registered for ``native_type``."""
        for candidate in inspect.getmro(native_type):
            cls = self.classes.get(candidate)
            if cls is not None:
                return cls
        return None

    def wrap(self, native, cls: type) -> BoundObject:
        existing = self._instances.get(id(native))
        if existing is not None and existing.__dict__.get("_native") is native:
            return existing
        wrapper = cls.__new__(cls)
        wrapper._native = native
        self.remember(native, wrapper)
        return wrapper

    # ========== MARSHALLING ==========
    def to_native(self, value):
        """Convert a Python-side value into its engine representation."""
        if isinstance(value, BoundObject):
            native = value.__dict__.get("_native")
            if native is None:
                raise TypeError(
                    f"{type(value).__name__}.__init__() must be called "
                    f"when overriding __init__"
                )
            return native
        if isinstance(value, BoundEnum):
            return value.value
        if isinstance(value, _PASSTHROUGH_TYPES) or value is None:
            return value
        if isinstance(value, list):
            return [self.to_native(item) for item in value]
        if isinstance(value, tuple):
            return tuple(self.to_native(item) for item in value)
        if isinstance(value, dict):
            return {key: self.to_native(item) for key, item in value.items()}
        return value

    def to_python(self, value):
        """Convert an engine result into its Python-side representation."""
        # Engine enums may subclass int (IntEnum) and must not pass through
        if isinstance(value, Enum) and not isinstance(value, BoundEnum):
            member = self.enum_members.get((type(value), value))
            if member is not None:
                return member
        if value is None or isinstance(value, _PASSTHROUGH_TYPES + (BoundObject, BoundEnum)):
            return value
        if isinstance(value, list):
            return [self.to_python(item) for item in value]
        if isinstance(value, tuple):
            return tuple(self.to_python(item) for item in value)
        if isinstance(value, dict):
            return {key: self.to_python(item) for key, item in value.items()}
        try:
            member = self.enum_members.get((type(value), value))
        except TypeError:  # unhashable engine object
            member = None
        if member is not None:
            return member
        cls = self.wrapper_for(type(value))
        if cls is not None:
            return self.wrap(value, cls)
        return value


# ========== MODULES ==========
def create_module(name: str, doc: Optional[str] = None) -> types.ModuleType:
    """Create an empty module with its own type registry."""
    module = types.ModuleType(name, doc)
    setattr(module, _REGISTRY_ATTRIBUTE, Registry())
    return module


def def_submodule(parent: types.ModuleType, name: str,
                  doc: Optional[str] = None) -> types.ModuleType:
    """Create ``parent.name``, sharing the parent's type registry."""
    module = types.ModuleType(f"{parent.__name__}.{name}", doc)
    setattr(module, _REGISTRY_ATTRIBUTE, registry_of(parent))
    setattr(parent, name, module)
    return module


def registry_of(module: types.ModuleType) -> Registry:
    """Type registry of ``module``, attaching a fresh one if it has none."""
    registry = getattr(module, _REGISTRY_ATTRIBUTE, None)
    if registry is None:
        registry = Registry()
        setattr(module, _REGISTRY_ATTRIBUTE, registry)
    return registry


# ========== CALL HELPERS ==========
def _make_signature(args: Sequence[arg]) -> Optional[inspect.Signature]:
    """Signature of the declared arguments, or None if none were declared."""
    if not args:
        return None
    return inspect.Signature([
        inspect.Parameter(a.name, inspect.Parameter.POSITIONAL_OR_KEYWORD, default=a.default)
        for a in args
    ])


def _bind_arguments(qualname: str, signature: Optional[inspect.Signature],
                    call_args: tuple, call_kwargs: dict) -> tuple:
    """Resolve a Python call into the positional argument list of the engine."""
    if signature is None:
        if call_kwargs:
            raise TypeError(
                f"{qualname}(): incompatible function arguments. "
                f"Keyword arguments are not supported, got {sorted(call_kwargs)}"
            )
        return call_args
    try:
        bound = signature.bind(*call_args, **call_kwargs)
    except TypeError as exc:
        raise TypeError(
            f"{qualname}(): incompatible function arguments. "
            f"Expected {qualname}{signature}: {exc}"
        ) from None
    bound.apply_defaults()
    return tuple(bound.arguments.values())


def _format_doc(name: str, signature: Optional[inspect.Signature],
                doc: Optional[str], with_self: bool = False) -> str:
    if signature is None:
        params = "(self, *args)" if with_self else "(*args)"
    elif with_self:
        params = str(signature).replace("(", "(self, ", 1) if signature.parameters else "(self)"
    else:
        params = str(signature)
    header = f"{name}{params}"
    return f"{header}\n\n{doc}" if doc else header


def _engine_call(native, member: Union[str, Callable]) -> Callable:
    """
    Resolve ``member`` on an engine object.

    Engine methods are looked up by name on the object itself so that
    overrides in engine subclasses (and trampolines) take part in dispatch.
    Other callables are called with the engine object as first argument.
    """
    if isinstance(member, str):
        return getattr(native, member)
    name = getattr(member, "__name__", None)
    if name is not None and hasattr(type(native), name):
        return getattr(native, name)
    return functools.partial(member, native)


def get_override(instance: BoundObject, name: str) -> Optional[Callable]:
    """
    Python override of a bound method, if ``instance``'s class defines one.

    Returns None when the attribute resolves to the bound (engine) method
    itself, which is how trampolines detect missing implementations of
    abstract engine methods.
    """
    attribute = inspect.getattr_static(type(instance), name, None)
    if attribute is None or getattr(attribute, _BOUND_MARKER, False):
        return None
    return getattr(instance, name)


# ========== CLASSES ==========
class class_:
    """
    Bind an engine class as a Python class of ``module``.

    Parameters
    ----------
    module : ModuleType
        Module receiving the class
    name : str
        Python class name
    native_type : type
        Engine class being wrapped
    bases : tuple, optional
        Base classes, given as bound classes or as already-registered
        engine types
    doc : str, optional
        Class documentation
    trampoline : callable, optional
        ``trampoline(wrapper, *native_args)`` building the engine object
        for constructors; used for engine classes meant to be subclassed
        from Python

    Notes
    -----
    Declarations return the binder itself so they can be chained.
    """

    def __init__(self, module: types.ModuleType, name: str, native_type: type,
                 bases: tuple = (), doc: Optional[str] = None,
                 trampoline: Optional[Callable] = None):
        self._registry = registry_of(module)
        self._native_type = native_type
        self._trampoline = trampoline
        wrapper_bases = tuple(self._resolve_base(b) for b in bases) or (BoundObject,)
        namespace = {
            "__doc__": doc,
            "__module__": module.__name__,
            "__init__": BoundObject.__init__,
            "_native_type": native_type,
            "_registry": self._registry,
        }
        self.cls = type(name, wrapper_bases, namespace)
        self._registry.register_class(native_type, self.cls)
        setattr(module, name, self.cls)
        logger.debug("Bound class %s.%s", module.__name__, name)

    def _resolve_base(self, base) -> type:
        if isinstance(base, type) and issubclass(base, BoundObject):
            return base
        cls = self._registry.classes.get(base)
        if cls is None:
            raise TypeError(
                f"class_('{self._native_type.__name__}'): referenced unknown base "
                f"type '{getattr(base, '__name__', base)}'"
            )
        return cls

    def _qualname(self, name: str) -> str:
        return f"{self.cls.__name__}.{name}"

    def def_init(self, *args: arg, doc: Optional[str] = None) -> "class_":
        """Declare the constructor."""
        registry = self._registry
        native_type = self._native_type
        trampoline = self._trampoline
        qualname = self._qualname("__init__")
        signature = _make_signature(args)

        def __init__(wrapper, *call_args, **call_kwargs):
            values = _bind_arguments(qualname, signature, call_args, call_kwargs)
            native_args = [registry.to_native(value) for value in values]
            if trampoline is not None:
                native = trampoline(wrapper, *native_args)
            else:
                native = native_type(*native_args)
            wrapper._native = native
            registry.remember(native, wrapper)

        __init__.__qualname__ = qualname
        __init__.__doc__ = _format_doc("__init__", signature, doc, with_self=True)
        self.cls.__init__ = __init__
        return self

    def def_(self, name: str, method: Union[str, Callable], *args: arg,
             doc: Optional[str] = None) -> "class_":
        """Declare a method forwarding to the engine method ``method``."""
        registry = self._registry
        qualname = self._qualname(name)
        signature = _make_signature(args)

        def bound_method(wrapper, *call_args, **call_kwargs):
            native = registry.to_native(wrapper)
            values = _bind_arguments(qualname, signature, call_args, call_kwargs)
            result = _engine_call(native, method)(*[registry.to_native(v) for v in values])
            return registry.to_python(result)

        bound_method.__name__ = name
        bound_method.__qualname__ = qualname
        bound_method.__doc__ = _format_doc(name, signature, doc, with_self=True)
        setattr(bound_method, _BOUND_MARKER, True)
        setattr(self.cls, name, bound_method)
        return self

    def def_property_readonly(self, name: str, getter: Union[str, Callable],
                              doc: Optional[str] = None) -> "class_":
        """Declare a read-only property backed by an engine getter."""
        return self.def_property(name, getter, None, doc=doc)

    def def_property(self, name: str, getter: Union[str, Callable],
                     setter: Union[str, Callable, None],
                     doc: Optional[str] = None) -> "class_":
        """Declare a property backed by an engine getter (and setter)."""
        registry = self._registry

        def fget(wrapper):
            native = registry.to_native(wrapper)
            return registry.to_python(_engine_call(native, getter)())

        fset = None
        if setter is not None:
            def fset(wrapper, value):
                native = registry.to_native(wrapper)
                _engine_call(native, setter)(registry.to_native(value))

        setattr(self.cls, name, property(fget, fset, doc=doc))
        return self

    def def_readwrite(self, name: str, field: str,
                      doc: Optional[str] = None) -> "class_":
        """Declare a property reading and writing the engine field ``field``."""
        registry = self._registry

        def fget(wrapper):
            return registry.to_python(getattr(registry.to_native(wrapper), field))

        def fset(wrapper, value):
            setattr(registry.to_native(wrapper), field, registry.to_native(value))

        setattr(self.cls, name, property(fget, fset, doc=doc))
        return self


# ========== ENUMS ==========
class enum_:
    """
    Bind an engine enumeration as a Python enum of ``module``.

    Members are declared one by one with :meth:`value`; each member's value
    is the engine value it stands for.
    """

    def __init__(self, module: types.ModuleType, name: str, doc: Optional[str] = None):
        self._module = module
        self._registry = registry_of(module)
        self._name = name
        self._doc = doc
        self._members = []
        self.cls = None
        self._rebuild()

    def _rebuild(self):
        enum_cls = BoundEnum(self._name, self._members, module=self._module.__name__)
        if self._doc is not None:
            enum_cls.__doc__ = self._doc
        self._registry.register_enum(enum_cls)
        setattr(self._module, self._name, enum_cls)
        self.cls = enum_cls

    def value(self, name: str, native_value) -> "enum_":
        """Declare member ``name`` standing for ``native_value``."""
        if any(existing == name for existing, _ in self._members):
            raise ValueError(f"{self._name}: member '{name}' declared twice")
        self._members.append((name, native_value))
        self._rebuild()
        return self

    def export_values(self) -> "enum_":
        """Publish every member at module level."""
        for member in self.cls:
            setattr(self._module, member.name, member)
        return self


# ========== FUNCTIONS ==========
def def_function(module: types.ModuleType, name: str, function: Callable,
                 *args: arg, doc: Optional[str] = None) -> Callable:
    """Bind ``function`` as ``module.name`` with named/defaulted arguments."""
    registry = registry_of(module)
    qualname = f"{module.__name__}.{name}"
    signature = _make_signature(args)

    def bound_function(*call_args, **call_kwargs):
        values = _bind_arguments(qualname, signature, call_args, call_kwargs)
        result = function(*[registry.to_native(value) for value in values])
        return registry.to_python(result)

    bound_function.__name__ = name
    bound_function.__qualname__ = name
    bound_function.__module__ = module.__name__
    bound_function.__doc__ = _format_doc(name, signature, doc)
    if signature is not None:
        bound_function.__signature__ = signature
    setattr(bound_function, _BOUND_MARKER, True)
    setattr(module, name, bound_function)
    logger.debug("Bound function %s", qualname)
    return bound_function
