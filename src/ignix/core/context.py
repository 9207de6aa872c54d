"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from ignix.core.command_runner import CommandRunner, RealCommandRunner
from ignix.core.config import IgnixConfig, load_config
from ignix.core.dependency_installer import DependencyInstaller
from ignix.core.http.abc import HttpClient
from ignix.core.http.real import RealHttpClient
from ignix.core.installers import ComponentInstaller, TemplateInstaller, ThemeInstaller
from ignix.core.prompter import ClickPrompter, Prompter
from ignix.core.registry.client import RegistryClient
from ignix.core.user_feedback import UserFeedback, feedback_for_mode


@dataclass(frozen=True)
class IgnixContext:
    """Immutable context holding the integrations every command needs.

    Created at CLI entry point and threaded through the application via
    click's ``ctx.obj``. Frozen to prevent accidental modification at runtime.

    Per-command state (output mode, project directory, config) is not stored
    here; commands build an InstallSession from it once they know their flags.
    """

    http: HttpClient
    runner: CommandRunner
    prompter: Prompter
    debug: bool

    @staticmethod
    def for_test(
        http: HttpClient | None = None,
        runner: CommandRunner | None = None,
        prompter: Prompter | None = None,
        debug: bool = False,
    ) -> "IgnixContext":
        """Create test context with optional pre-configured integrations.

        Unspecified integrations default to fakes, so tests never touch the
        network or spawn a package manager.

        Example:
            >>> http = FakeHttpClient(responses={"https://registry.test/registry.json": {...}})
            >>> ctx = IgnixContext.for_test(http=http)
            >>> result = runner.invoke(cli, ["add", "component", "button"], obj=ctx)
        """
        from tests.fakes.command_runner import FakeCommandRunner
        from tests.fakes.http import FakeHttpClient
        from tests.fakes.prompter import FakePrompter

        return IgnixContext(
            http=http if http is not None else FakeHttpClient(),
            runner=runner if runner is not None else FakeCommandRunner(),
            prompter=prompter if prompter is not None else FakePrompter(),
            debug=debug,
        )


def create_context(*, debug: bool) -> IgnixContext:
    """Create production context with real implementations.

    Called once at CLI entry point.
    """
    return IgnixContext(
        http=RealHttpClient(),
        runner=RealCommandRunner(),
        prompter=ClickPrompter(),
        debug=debug,
    )


@dataclass(frozen=True)
class InstallSession:
    """Everything one command run needs, wired for its output mode and project.

    Built inside the scoped working directory, after flags are parsed. The
    registry client (and so its manifest cache) lives exactly as long as the
    session.
    """

    project_dir: Path
    json_mode: bool
    config: IgnixConfig
    feedback: UserFeedback
    registry: RegistryClient
    dependencies: DependencyInstaller
    components: ComponentInstaller
    templates: TemplateInstaller
    themes: ThemeInstaller


def create_session(
    ctx: IgnixContext,
    project_dir: Path,
    *,
    json_mode: bool,
    feedback: UserFeedback | None = None,
    config: IgnixConfig | None = None,
) -> InstallSession:
    """Wire the registry client and installers for one command run.

    Args:
        ctx: Application context supplying the integrations
        project_dir: Project root (the scoped working directory)
        json_mode: Whether human output is suppressed
        feedback: Override the feedback sink (defaults to one chosen by json_mode)
        config: Override the configuration (defaults to loading from project_dir)

    Raises:
        ValueError: If the project configuration is invalid
    """
    resolved_feedback = feedback if feedback is not None else feedback_for_mode(json_mode=json_mode)
    resolved_config = config if config is not None else load_config(project_dir)

    registry = RegistryClient(ctx.http, resolved_config, resolved_feedback)
    dependencies = DependencyInstaller(
        ctx.runner, project_dir, resolved_feedback, silent=json_mode
    )
    components = ComponentInstaller(
        registry,
        ctx.http,
        dependencies,
        resolved_feedback,
        components_dir=resolved_config.components_dir,
    )
    templates = TemplateInstaller(
        registry,
        ctx.http,
        dependencies,
        resolved_feedback,
        components=components,
        template_dir=resolved_config.template_dir,
    )
    themes = ThemeInstaller(
        registry,
        ctx.http,
        dependencies,
        resolved_feedback,
        themes_dir=resolved_config.themes_dir,
    )

    return InstallSession(
        project_dir=project_dir,
        json_mode=json_mode,
        config=resolved_config,
        feedback=resolved_feedback,
        registry=registry,
        dependencies=dependencies,
        components=components,
        templates=templates,
        themes=themes,
    )
