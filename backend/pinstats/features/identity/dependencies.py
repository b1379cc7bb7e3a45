from typing import Annotated

from fastapi import Depends

from pinstats.features.identity.service import IdentityResolver
from pinstats.features.stats.dependencies import IFPAGatewayDep, MatchPlayGatewayDep


def get_identity_resolver(
    ifpa_gateway: IFPAGatewayDep, matchplay_gateway: MatchPlayGatewayDep
) -> IdentityResolver:
    return IdentityResolver(ifpa_gateway, matchplay_gateway)


IdentityResolverDep = Annotated[IdentityResolver, Depends(get_identity_resolver)]
