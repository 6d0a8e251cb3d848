"""AWS: profile -> region -> EKS cluster."""

from __future__ import annotations

from ktx.constants.enums import CloudProvider
from ktx.constants.values import AWS_PROGRAM
from ktx.controllers.cloud.cli import json_field, json_list
from ktx.controllers.cloud.fetchers.base_fetcher import CloudFetcher
from ktx.models.core.import_path import ImportPath, ImportSegment


class AwsFetcher(CloudFetcher):
    provider = CloudProvider.AWS

    async def _list_profiles(self) -> list[str]:
        output = await self._cli.run(AWS_PROGRAM, ["configure", "list-profiles"])
        return [line.strip() for line in output.splitlines() if line.strip()]

    async def _check_account(self) -> bool:
        return bool(await self._list_profiles())

    async def list_options(self, path: ImportPath) -> list[ImportSegment]:
        if len(path) == 1:
            return [ImportSegment(name, name) for name in await self._list_profiles()]

        if len(path) == 2:
            regions = await self._cli.run_json(
                AWS_PROGRAM,
                ["--profile", path.aws_profile, "--output", "json", "ec2", "describe-regions"],
            )
            names = [json_field(region, "RegionName") for region in json_list(regions, "Regions")]
            return [ImportSegment(name, name) for name in names]

        if len(path) == 3:
            clusters = await self._cli.run_json(
                AWS_PROGRAM,
                [
                    "--profile",
                    path.aws_profile,
                    "--output",
                    "json",
                    "eks",
                    "list-clusters",
                    "--region",
                    path.aws_region,
                ],
            )
            names = [
                name if isinstance(name, str) else ""
                for name in json_list(clusters, "clusters")
            ]
            return [ImportSegment(name, name) for name in names]

        return []

    async def import_cluster(self, path: ImportPath) -> None:
        await self._cli.run(
            AWS_PROGRAM,
            [
                "--region",
                path.aws_region,
                "--profile",
                path.aws_profile,
                "eks",
                "update-kubeconfig",
                "--name",
                path.cluster_id,
            ],
        )
