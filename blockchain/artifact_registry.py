"""
Artifact Registry
Resolves compiled Hardhat artifacts by contract name
"""

import os
import json
from pathlib import Path
from typing import Dict, List
from loguru import logger

from .errors import ArtifactNotFoundError, AmbiguousArtifactError, InvalidArtifactError


class ArtifactRegistry:
    """
    Looks up compiled contract artifacts under a Hardhat artifacts directory

    Layout: artifacts/contracts/<File>.sol/<Name>.json
    Names can be bare ("Mentorship") or fully qualified
    ("contracts/Mentorship.sol:Mentorship").
    """

    def __init__(self, artifacts_dir: str = "artifacts"):
        """
        Initialize Artifact Registry

        Args:
            artifacts_dir: Root of the compiled artifacts tree
        """
        self.artifacts_dir = Path(artifacts_dir)
        self.cache = {}

        logger.debug(f"Artifact registry rooted at {self.artifacts_dir}")

    def get_artifact(self, name: str) -> Dict:
        """
        Load a compiled artifact

        Args:
            name: Bare or fully qualified contract name

        Returns:
            Artifact dict with 'abi' and 'bytecode'
        """
        if name in self.cache:
            return self.cache[name]

        if ':' in name:
            path = self._resolve_qualified(name)
        else:
            path = self._resolve_bare(name)

        with open(path, 'r') as f:
            artifact = json.load(f)

        self._validate(name, artifact)

        logger.debug(f"Loaded artifact {name} from {path}")
        self.cache[name] = artifact
        return artifact

    def _resolve_qualified(self, name: str) -> Path:
        """Resolve 'path/File.sol:Name' to its artifact file"""
        source_name, contract_name = name.rsplit(':', 1)
        path = self.artifacts_dir / source_name / f"{contract_name}.json"

        if not path.is_file():
            raise ArtifactNotFoundError(
                f"Artifact for contract \"{name}\" not found at {path}. "
                "Run 'npx hardhat compile' first"
            )

        return path

    def _resolve_bare(self, name: str) -> Path:
        """Resolve a bare contract name, rejecting ambiguous matches"""
        candidates = self._find_candidates(name)

        if not candidates:
            raise ArtifactNotFoundError(
                f"Artifact for contract \"{name}\" not found under {self.artifacts_dir}. "
                "Run 'npx hardhat compile' first"
            )

        if len(candidates) > 1:
            qualified = ', '.join(self._qualified_name(path) for path in candidates)
            raise AmbiguousArtifactError(
                f"There are multiple artifacts for contract \"{name}\": {qualified}. "
                "Use a fully qualified name instead"
            )

        return candidates[0]

    def _find_candidates(self, name: str) -> List[Path]:
        if not self.artifacts_dir.is_dir():
            return []

        candidates = []
        for path in sorted(self.artifacts_dir.rglob(f"{name}.json")):
            relative = path.relative_to(self.artifacts_dir)

            # build-info holds compiler input/output, not contract artifacts
            if relative.parts[0] == 'build-info':
                continue

            candidates.append(path)

        return candidates

    def _qualified_name(self, path: Path) -> str:
        source_name = path.parent.relative_to(self.artifacts_dir).as_posix()
        return f"{source_name}:{path.stem}"

    def _validate(self, name: str, artifact: Dict):
        """Reject artifacts that cannot be deployed"""
        if 'abi' not in artifact or 'bytecode' not in artifact:
            raise InvalidArtifactError(f"Artifact for {name} is missing abi or bytecode")

        bytecode = artifact['bytecode']
        if not bytecode or bytecode == '0x':
            raise InvalidArtifactError(
                f"{name} has no bytecode; abstract contracts and interfaces cannot be deployed"
            )

    def list_contracts(self) -> List[str]:
        """Fully qualified names of every compiled contract"""
        if not self.artifacts_dir.is_dir():
            return []

        names = []
        for root, dirs, files in os.walk(self.artifacts_dir):
            dirs[:] = [d for d in dirs if d != 'build-info']
            for filename in files:
                if filename.endswith('.json') and not filename.endswith('.dbg.json'):
                    names.append(self._qualified_name(Path(root) / filename))

        return sorted(names)
