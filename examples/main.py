import dotenv
from eth_keys import keys
from eth_utils import decode_hex, keccak
from rich.console import Console
from rich.traceback import install

from recoverable_sig import ChainContext, CompactSignature, get_settings, recover_compact, sign_compact
from recoverable_sig.logger import configure_logging

# Install rich traceback handler
install()

# Initialize console for pretty printing
console = Console()

# Hardhat's first development account
PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
PUBLIC_KEY = "04" + keys.PrivateKey(decode_hex(PRIVATE_KEY)).public_key.to_bytes().hex()


def main():
    settings = get_settings()
    configure_logging(settings.log_level)

    message = "Hello Ethereum!"
    digest = keccak(text=message)
    console.print(f"[bold]Message:[/bold] {message}")
    console.print(f"[bold]Digest:[/bold] 0x{digest.hex()}")

    for chain in (ChainContext(), ChainContext(chain_id=1)):
        signature = sign_compact(digest, PRIVATE_KEY, PUBLIC_KEY, chain)
        if signature is None:
            console.print("[red]Signing failed: the public key does not match the private key[/red]")
            return

        compact = CompactSignature.from_bytes(signature)
        console.print(f"\n[bold]Chain id:[/bold] {chain.chain_id} (v base {chain.v_base})")
        console.print(f"Compact signature: {compact.to_hex()}")
        console.print(f"RSV signature:     {compact.to_rsv()}")

        recovered = recover_compact(digest, signature, chain)
        status = "[green]match[/green]" if recovered == PUBLIC_KEY else "[red]mismatch[/red]"
        console.print(f"Recovered key:     {recovered} ({status})")


if __name__ == "__main__":
    # Optional environment variables:
    # RECOVERABLE_SIG_CHAIN_ID
    # RECOVERABLE_SIG_LOG_LEVEL (e.g. DEBUG)
    dotenv.load_dotenv()
    main()
