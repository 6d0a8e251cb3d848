"""GCP: project -> GKE cluster (zone kept as secondary id)."""

from __future__ import annotations

from ktx.constants.enums import CloudProvider
from ktx.constants.values import GCLOUD_PROGRAM
from ktx.controllers.cloud.cli import json_field
from ktx.controllers.cloud.fetchers.base_fetcher import CloudFetcher
from ktx.models.core.import_path import ImportPath, ImportSegment

ACTIVE_LIFECYCLE_STATE = "ACTIVE"
SYSTEM_PROJECT_PREFIX = "sys-"


class GcpFetcher(CloudFetcher):
    provider = CloudProvider.GCP

    async def _check_account(self) -> bool:
        info = await self._cli.run_json(GCLOUD_PROGRAM, ["--format", "json", "info"])
        return bool(json_field(info, "config", "account"))

    async def list_options(self, path: ImportPath) -> list[ImportSegment]:
        if len(path) == 1:
            projects = await self._cli.run_json(
                GCLOUD_PROGRAM, ["--format", "json", "projects", "list"]
            )
            options = []
            for project in projects if isinstance(projects, list) else []:
                project_id = json_field(project, "projectId")
                name = json_field(project, "name")
                if (
                    project_id
                    and not project_id.startswith(SYSTEM_PROJECT_PREFIX)
                    and name
                    and json_field(project, "lifecycleState") == ACTIVE_LIFECYCLE_STATE
                ):
                    options.append(ImportSegment(project_id, f"{name} ({project_id})"))
            return options

        if len(path) == 2:
            clusters = await self._cli.run_json(
                GCLOUD_PROGRAM,
                [
                    "--format",
                    "json",
                    "container",
                    "clusters",
                    "list",
                    "--project",
                    path.gcp_project,
                ],
            )
            return [
                ImportSegment(
                    json_field(cluster, "name"),
                    json_field(cluster, "name"),
                    json_field(cluster, "zone"),
                )
                for cluster in (clusters if isinstance(clusters, list) else [])
            ]

        return []

    async def import_cluster(self, path: ImportPath) -> None:
        await self._cli.run(
            GCLOUD_PROGRAM,
            [
                "container",
                "clusters",
                "get-credentials",
                path.cluster_id,
                "--zone",
                path.gcp_zone,
                "--project",
                path.gcp_project,
            ],
        )
