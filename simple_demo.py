#!/usr/bin/env python3
"""
Simple demo plugin: declares a small pipeline and serves it.

Run it directly and point an orchestrator at the handshake line it prints.
"""

import time

import structlog

from gaia_sdk import Argument, ExitPipeline, InputType, Job, JobFailed, ManualInteraction, serve

logger = structlog.get_logger("simple_demo")


def create_user(arguments):
    """Pretend to create a database user."""
    username = arguments.get("username")
    if not username:
        raise JobFailed("username is required")
    logger.info("Creating user", username=username)
    time.sleep(1)


def migrate_db(arguments):
    """Pretend to migrate the database, or stop early on a dry run."""
    if arguments.get("dry_run", "false").lower() == "true":
        raise ExitPipeline()
    logger.info("Migrating database", database=arguments.get("database"))
    time.sleep(2)


def deploy(arguments):
    """Pretend to deploy."""
    logger.info("Deploying", environment=arguments.get("environment"))
    time.sleep(1)


jobs = [
    Job(
        title="Create user",
        description="Creates the application database user.",
        handler=create_user,
        arguments=[
            Argument(description="Username for the database schema", type=InputType.TEXT_FIELD, key="username"),
            Argument(description="Password for the user", type=InputType.SECRET, key="password"),
        ],
    ),
    Job(
        title="Migrate DB",
        description="Applies pending migrations.",
        handler=migrate_db,
        depends_on=["create user"],
        arguments=[
            Argument(description="Database name", type=InputType.TEXT_FIELD, key="database", value="app"),
            Argument(description="Stop after this step", type=InputType.BOOLEAN, key="dry_run", value="false"),
        ],
    ),
    Job(
        title="Deploy",
        description="Deploys the application.",
        handler=deploy,
        depends_on=["Create user", "Migrate DB"],
        arguments=[
            Argument(description="Target environment", type=InputType.TEXT_AREA, key="environment", value="staging"),
        ],
        interaction=ManualInteraction(description="Confirm the deployment", type=InputType.BOOLEAN),
    ),
]


if __name__ == "__main__":
    serve(jobs)
