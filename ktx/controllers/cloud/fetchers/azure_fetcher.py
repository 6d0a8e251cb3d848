"""Azure: subscription -> AKS cluster (resource group kept as secondary id)."""

from __future__ import annotations

from ktx.constants.enums import CloudProvider
from ktx.constants.values import AZURE_PROGRAM
from ktx.controllers.cloud.cli import json_field
from ktx.controllers.cloud.fetchers.base_fetcher import CloudFetcher
from ktx.models.core.import_path import ImportPath, ImportSegment


class AzureFetcher(CloudFetcher):
    provider = CloudProvider.AZURE

    async def _check_account(self) -> bool:
        account = await self._cli.run_json(
            AZURE_PROGRAM, ["account", "show", "--output", "json"]
        )
        return bool(json_field(account, "user", "name"))

    async def list_options(self, path: ImportPath) -> list[ImportSegment]:
        if len(path) == 1:
            subscriptions = await self._cli.run_json(
                AZURE_PROGRAM, ["account", "list", "--output", "json"]
            )
            options = []
            for subscription in subscriptions if isinstance(subscriptions, list) else []:
                subscription_id = json_field(subscription, "id")
                name = json_field(subscription, "name")
                if subscription_id and name:
                    options.append(
                        ImportSegment(subscription_id, f"{name} ({subscription_id})")
                    )
            return options

        if len(path) == 2:
            clusters = await self._cli.run_json(
                AZURE_PROGRAM,
                [
                    "aks",
                    "list",
                    "--subscription",
                    path.azure_subscription,
                    "--output",
                    "json",
                ],
            )
            options = []
            for cluster in clusters if isinstance(clusters, list) else []:
                name = json_field(cluster, "name")
                group = json_field(cluster, "resourceGroup")
                options.append(ImportSegment(name, f"{name} (RG: {group})", group))
            return options

        return []

    async def import_cluster(self, path: ImportPath) -> None:
        await self._cli.run(
            AZURE_PROGRAM,
            [
                "aks",
                "get-credentials",
                "--resource-group",
                path.azure_resource_group,
                "--name",
                path.cluster_id,
                "--subscription",
                path.azure_subscription,
                "--overwrite-existing",
            ],
        )
