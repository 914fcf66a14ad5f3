# iockit

A small inversion-of-control container that keeps things explicit. You
register bean definitions, boot the application, and resolve beans by type
or by name. Startup order, singleton caching, lifecycle hooks and event
dispatch follow fixed, predictable rules.

## Features

- Singleton and prototype scopes (`iockit.scope.Scope`). Non-lazy singletons
  are created eagerly at boot, in registration order.
- Resolution by exposed type or by bean name. A primary bean settles
  ambiguity; dependency cycles are detected and raised as `BeanCycleError`.
- Lifecycle callbacks: `InitializingBean.after_properties_set`, a
  per-definition `init_hook`, `DisposableBean.destroy` and a `destroy_hook`.
  Singletons are destroyed in reverse creation order.
- A built-in synchronous event dispatcher. The container publishes boot,
  shutdown and bean lifecycle events through it, and listener beans are
  discovered and registered automatically at boot.
- A shared ordering model: `PriorityOrdered` values first, then `Ordered`
  values by ascending order, then everything else, ties in original order.
- Bootstrap registrars, so modules and starters can contribute definitions
  before boot.

## Installation

```
pip install iockit
```

## Quick start

```python
from iockit.application import Application
from iockit.definition import define
from iockit.typed import get


class Greeter:
    def message(self) -> str:
        return "hello"


app = Application()
app.register(define("greeter", Greeter, lambda resolver: Greeter()))
app.boot()

greeter = get(app, Greeter, "greeter")
print(greeter.message())  # hello

app.shutdown()
```

`Application` is also a context manager: entering boots it, leaving shuts
it down.

A factory receives a resolver. Use it to look up the bean's own
dependencies, so that cycle detection can follow the chain:

```python
class Repo: ...

class Service:
    def __init__(self, repo: Repo) -> None:
        self.repo = repo

app.register(
    define("repo", Repo, lambda resolver: Repo()),
    define("service", Service, lambda resolver: Service(get(resolver, Repo))),
)
```

`define(name, bean_type, factory, ...)` takes keyword options `scope`,
`primary`, `lazy`, `exposed_types`, `dependencies`, `injector`, `init_hook`,
`destroy_hook` and `source`. Exposed types are de-duplicated. An invalid
definition raises `InvalidDefinitionError` when registered; a repeated name
raises `DuplicateBeanError`.

## Lookups and errors

`Application.resolve(bean_type, name=None)` and `resolve_all(bean_type)`
return beans without checking them; `iockit.typed.get` and `get_all` also
check each bean is an instance of the requested class and raise `TypeError`
otherwise. `resolve_all` / `get_all` return the beans sorted by the ordering
model.

Errors from `iockit.factory` derive from `ContainerError`:
`BeanNotFoundError`, `AmbiguousBeanError`, `BeanCycleError`,
`BeanCreationError` (a failing factory, injector or init hook, with the
original error as `cause`), `DuplicateBeanError` and
`DestroySingletonsError` (collected destroy-hook and listener failures at
shutdown).

## Ordering

```python
from iockit.ordering import compare, sort_by_order
```

Any object with an `order()` method is ordered; one that also has a
`priority_order()` method is in the priority tier. `sort_by_order(values)`
sorts a list in place and stably. `HIGHEST_PRECEDENCE` and
`LOWEST_PRECEDENCE` bound the usual order range.

## Events

```python
from dataclasses import dataclass
from iockit.events import SyncDispatcher, new_listener


@dataclass
class UserCreated:
    id: str


dispatcher = SyncDispatcher(
    new_listener(UserCreated, lambda event: print("user created:", event.id))
)
dispatcher.publish(UserCreated(id="u-1"))  # user created: u-1
```

Listeners match the exact type of the event. `new_priority_listener` puts a
listener in the priority tier. The first listener that raises stops
dispatch and the error propagates.

Inside an application, `Application.publish(event)` uses the container's own
dispatcher, which is also available as a bean under `PUBLISHER_BEAN_NAME`
and `DISPATCHER_BEAN_NAME`. Any bean that exposes `Listener` is registered
with it during boot. The container publishes `ContainerBootingEvent`,
`ContainerBootedEvent`, `ContainerShuttingDownEvent`,
`ContainerShutdownEvent`, `BeanInitializedEvent` and `BeanDestroyedEvent`.

## Bootstrap registrars

```python
from iockit.bootstrap import register_beans, register_starter, reset_bootstrap
```

Each registrar is a function that receives the application and registers
definitions on it. At boot, bean registrars run first, then starter
registrars, each in registration order. Registering the same module name
twice raises `ValueError`. `iockit.application.start()` boots a new
application from these registrars and keeps it as `default_application()`.

## Other modules

- `iockit.stack.Stack`: a LIFO stack whose `pop` and `peek` return None
  when empty.
- `iockit.bind_errors`: `ConfigurationBindError`, `wrap_bind_error` and
  `as_configuration_bind_error`, for reporting a configuration-binding
  failure with its bean name, type name and prefix.
- `iockit.version`: `now()`, `summary()`, `main_version()` and
  `print_version()`.

## Command line

```
ioctl
ioctl version
```

With no command it prints a welcome line; `ioctl version` prints the
version summary. Unknown arguments print usage to standard error and exit
with status 1.

## What it does not do

- It does not scan source code for annotations or generate registration
  code; definitions and registrars are written by hand.
- It does not load configuration files or bind properties onto beans. Only
  the error type for reporting a binding failure is provided.