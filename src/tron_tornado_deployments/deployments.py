"""Checkpointed deployment sequence for the Tornado contracts."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from .addresses import to_base58, to_sun
from .artifacts import load_artifact
from .constants import (
    CONTRACT_ARTIFACTS,
    ERC20_TORNADO,
    ETH_TORNADO,
    HASHER,
    MOCK_MINT_AMOUNT,
    MOCK_MINT_FUNCTION,
    MOCK_MINT_RECIPIENT,
    MOCK_TOKEN_DECIMALS,
    MOCK_TOKEN_NAME,
    MOCK_TOKEN_SYMBOL,
    USDT,
    VERIFIER,
)
from .exceptions import ConfigurationError
from .types import ContractHandle, Deployed, Reused, RunContext, StepResult

logger = logging.getLogger(__name__)

ParameterBuilder = Callable[[RunContext, Dict[str, StepResult]], List[Any]]
AfterDeployHook = Callable[[RunContext, ContractHandle], None]


def _no_parameters(context: RunContext, results: Dict[str, StepResult]) -> List[Any]:
    return []


@dataclass(frozen=True)
class DeploymentStep:
    """One contract's create-or-reuse unit of work."""

    key: str  # Address store key, e.g. "hasher"
    artifact: str  # Compiled contract name, e.g. "Hasher"
    parameters: ParameterBuilder = _no_parameters
    after_deploy: Optional[AfterDeployHook] = None


def _dependency_address(
    context: RunContext, results: Dict[str, StepResult], key: str
) -> str:
    """
    Address of a contract an earlier step produced.

    Falls back to the store when the step is not part of this run.

    Raises:
        ConfigurationError: If the contract was never deployed
    """
    if key in results:
        return results[key].address

    address = context.store.get(context.network, key)
    if address is None:
        raise ConfigurationError(
            f"'{key}' must be deployed on '{context.network}' before its dependents"
        )
    return address


def _mock_token_parameters(context: RunContext, results: Dict[str, StepResult]) -> List[Any]:
    return [MOCK_TOKEN_NAME, MOCK_TOKEN_SYMBOL, MOCK_TOKEN_DECIMALS]


def _eth_pool_parameters(context: RunContext, results: Dict[str, StepResult]) -> List[Any]:
    settings = context.settings
    return [
        _dependency_address(context, results, VERIFIER),
        _dependency_address(context, results, HASHER),
        settings.require_int("eth_amount", "ETH_AMOUNT"),
        settings.require_int("merkle_tree_height", "MERKLE_TREE_HEIGHT"),
    ]


def _erc20_pool_parameters(context: RunContext, results: Dict[str, StepResult]) -> List[Any]:
    settings = context.settings
    return [
        _dependency_address(context, results, VERIFIER),
        _dependency_address(context, results, HASHER),
        settings.require_int("token_amount", "TOKEN_AMOUNT"),
        settings.require_int("merkle_tree_height", "MERKLE_TREE_HEIGHT"),
        settings.require("erc20_token", "ERC20_TOKEN"),
    ]


def _mint_test_tokens(context: RunContext, contract: ContractHandle) -> None:
    # Fixed test fixture: one token to a known wallet on every fresh mock deploy
    info = context.client.send(
        contract, MOCK_MINT_FUNCTION, [MOCK_MINT_RECIPIENT, to_sun(MOCK_MINT_AMOUNT)]
    )
    logger.info("Mint usdt to: %s %s", MOCK_MINT_RECIPIENT, info)


DEPLOYMENT_STEPS: Sequence[DeploymentStep] = (
    DeploymentStep(USDT, CONTRACT_ARTIFACTS[USDT], _mock_token_parameters, _mint_test_tokens),
    DeploymentStep(HASHER, CONTRACT_ARTIFACTS[HASHER]),
    DeploymentStep(VERIFIER, CONTRACT_ARTIFACTS[VERIFIER]),
    DeploymentStep(ETH_TORNADO, CONTRACT_ARTIFACTS[ETH_TORNADO], _eth_pool_parameters),
    DeploymentStep(ERC20_TORNADO, CONTRACT_ARTIFACTS[ERC20_TORNADO], _erc20_pool_parameters),
)


def run_step(
    context: RunContext, step: DeploymentStep, results: Dict[str, StepResult]
) -> StepResult:
    """
    Deploy one contract, or reuse the recorded one.

    Args:
        context: Run context
        step: Step to execute
        results: Outcomes of the steps already run, keyed by contract key

    Returns:
        Reused if an address was recorded and reset is off, otherwise Deployed

    Raises:
        ConfigurationError: If a required setting or dependency is missing
        RPCError: If any remote call fails
    """
    artifact = load_artifact(step.artifact, context.artifacts_dir)

    existing = context.store.get(context.network, step.key)
    if not context.reset and existing:
        logger.info("%s already deployed, skipping. Use --reset to override.", step.key)
        return Reused(step.key, context.client.contract(artifact.abi, existing))

    parameters = step.parameters(context, results)
    hex_address, txid = context.client.deploy_contract(artifact, parameters)

    address = to_base58(hex_address)
    logger.info("Deployed %s %s %s", step.key, hex_address, address)

    contract = context.client.contract(artifact.abi, address)
    context.store.set(context.network, step.key, address)

    if step.after_deploy is not None:
        step.after_deploy(context, contract)

    return Deployed(step.key, contract, txid)


def run_deployment(
    context: RunContext, steps: Sequence[DeploymentStep] = DEPLOYMENT_STEPS
) -> Dict[str, StepResult]:
    """
    Run every step in order, saving the address store after each one.

    Any error aborts the run; steps completed before it stay on disk, so
    the next run resumes at the failed step.

    Args:
        context: Run context
        steps: Steps to run (defaults to the full five-contract sequence)

    Returns:
        Outcome per contract key, in execution order
    """
    context.store.ensure_network(context.network)

    if not context.reset:
        logger.info(
            "Info: use --reset or remove items from %s to force new deploy",
            context.store.path.name,
        )

    results: Dict[str, StepResult] = {}
    for step in steps:
        results[step.key] = run_step(context, step, results)
        context.store.save()

    return results
