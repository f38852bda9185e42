import asyncio
from sdk.collection import CollectionView
from sdk.models import ProductIn
from sdk.notices import NoticeBoard
from sdk.pyinventory import AsyncInventoryClient, InventoryClient
from sdk.store import InventoryStore

BASE_URL = "http://127.0.0.1:8085/api"

def seed(n: int):
    c = InventoryClient(base_url=BASE_URL)
    c.session.post("http://127.0.0.1:8085/reset")
    for i in range(n):
        c.create_product(ProductIn(name=f"Item {i}", price=1.0 + i, quantity=5 * i, category="Demo"))

async def main():
    seed(5)
    notices = NoticeBoard(listener=lambda n: print(f"[{n.level}] {n.message}"))

    async with AsyncInventoryClient(base_url=BASE_URL) as client:
        view = CollectionView(InventoryStore(), client, notices)
        await view.fetch_all()
        print(f"\n📦 Loaded {view.snapshot().metrics.total_products} products")

        targets = list(view.store.products[:3])
        always = lambda p: True

        # Run concurrent deletes; the duplicate request for the first record is ignored
        print("\n⚡ Deleting three products concurrently...")
        results = await asyncio.gather(
            *(view.delete(p, always) for p in targets),
            view.delete(targets[0], always),
        )
        print("Results:", results)

        state = view.snapshot()
        print(f"\n📦 Remaining: {[p.name for p in state.visible]}")
        print(f"📊 Metrics: {state.metrics}")

if __name__ == "__main__":
    asyncio.run(main())
