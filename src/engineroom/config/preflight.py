"""Preflight checks to validate the transcoding environment."""

from engineroom.config.loader import (
    ConfigError,
    get_home_config_path,
    get_local_config_path,
    home_config_exists,
    load_config,
    local_config_exists,
)
from engineroom.config.schema import EngineroomConfig
from engineroom.config.settings import ConfigEngineSettings
from engineroom.console import console
from engineroom.engines import register_builtin_engines
from engineroom.host import HostPlatform
from engineroom.registry import EngineRegistry


def build_registry(
    config: EngineroomConfig, host: HostPlatform | None = None
) -> EngineRegistry:
    """Create a registry for `config` and register the built-in engines."""
    registry = EngineRegistry(ConfigEngineSettings(config), host=host)
    register_builtin_engines(registry)
    return registry


def check_config() -> EngineroomConfig | None:
    """Validate that the config files parse."""
    try:
        config = load_config(strict=True)
    except ConfigError as e:
        console.print(f"[red]✗[/red] {e}")
        return None
    console.print("[green]✓[/green] Configuration loaded")
    if home_config_exists():
        console.print(f"  [dim]global: {get_home_config_path()}[/dim]")
    if local_config_exists():
        console.print(f"  [dim]local: {get_local_config_path()}[/dim]")
    return config


def check_engines(registry: EngineRegistry) -> bool:
    """Report every registered engine and whether any is usable."""
    console.print("\n[bold]Transcoding Engines:[/bold]")

    for state in registry.all_engines():
        if state.available:
            version = f" {state.version}" if state.version else ""
            label = "" if state.enabled else " [dim](disabled)[/dim]"
            console.print(
                f"  [green]✓[/green] {state.name}{label} "
                f"([cyan]{state.executable}[/cyan]){version}"
            )
        else:
            reason = (state.reason or "not verified").replace("\n", " ")
            console.print(f"  [dim]✗[/dim] {state.name} - [dim]{reason}[/dim]")

    active = registry.engines()
    if not active:
        console.print("\n[yellow]⚠[/yellow] No usable transcoding engines detected.")
        console.print("[dim]Install FFmpeg or configure an executable path.[/dim]")
        return False

    console.print(f"\n[green]✓[/green] {len(active)} engine(s) active")
    return True


def run_all_checks(host: HostPlatform | None = None) -> bool:
    """Run all preflight checks."""
    console.print("[bold]Running preflight checks...[/bold]\n")

    config = check_config()
    all_passed = False
    if config is not None:
        registry = build_registry(config, host)
        try:
            all_passed = check_engines(registry)
        finally:
            registry.close()

    if all_passed:
        console.print("\n[bold green]All preflight checks passed![/bold green]")
    else:
        console.print("\n[bold red]Some preflight checks failed.[/bold red]")

    return all_passed
