class DistributorError(Exception):
    """Base class for every error raised by the distributor"""

    message = "MerkleDistributor: ERROR"

    def __init__(self, *args):
        super().__init__(*(args or (self.message,)))


# on-chain


class InvalidProof(DistributorError):
    """Raise if the root recomputed from a proof is not the active merkle root"""

    message = "MerkleDistributor: INVALID_PROOF"


class AlreadyClaimed(DistributorError):
    """Raise if an index of the bitmap distributor has already been claimed"""

    message = "MerkleDistributor: ALREADY_CLAIMED"


class InvalidClaimAmount(DistributorError):
    """Raise if a claim exceeds the entitlement, or what is left of it"""

    message = "MerkleDistributor: INVALID_CLAIM_AMOUNT"


class TransferFailed(DistributorError):
    """Raise if the token returns false from a transfer"""

    message = "MerkleDistributor: TRANSFER_FAILED"


class MintFailed(DistributorError):
    """Raise if the token returns false from a mint"""

    message = "MerkleDistributor: MINT_FAILED"


class Unauthorized(DistributorError):
    """Raise if a restricted function is called by the wrong account"""

    message = "Ownable: caller is not the owner"


class InvalidAddress(DistributorError):
    """Raise if an address is malformed or the zero address"""

    message = "MerkleDistributor: INVALID_ADDRESS"


class InvalidFeeAmount(DistributorError):
    """Raise if a fee is outside of [0, 10000] basis points"""

    message = "MerkleDistributor: INVALID_FEE"


class DuplicateValue(DistributorError):
    """Raise if an admin setter is passed the value already in effect"""

    message = "MerkleDistributor: DUPLICATE_VALUE"


class DuplicateRoot(DuplicateValue):
    message = "MerkleDistributor: DUPLICATE_ROOT"


class DuplicateAddress(DuplicateValue):
    message = "MerkleDistributor: DUPLICATE_ADDRESS"


class SameFee(DuplicateValue):
    message = "MerkleDistributor: SAME_FEE"


class InsufficientBalance(DistributorError):
    """Raise if a token holder transfers more than it holds"""

    message = "ERC20: transfer amount exceeds balance"


# off-chain


class DuplicateAccount(DistributorError):
    """Raise if an account appears twice in a balance map"""

    message = "Duplicate address"


class InvalidAmount(DistributorError):
    """Raise if an entitlement is not a positive uint256"""

    message = "Invalid amount"


class InvalidDistributionError(DistributorError):
    """Raise if a published distribution does not match its merkle root"""

    message = "Invalid distribution"


class BadConfigException(DistributorError):
    pass


class MissingEnvironmentVariableException(DistributorError):
    pass


class MissingDBException(DistributorError):
    pass
