#!/usr/bin/env python
from sdk.models import ProductIn
from sdk.pyinventory import InventoryClient

def main():
    c = InventoryClient(base_url="http://127.0.0.1:8085/api")

    # -----------------------------
    # Reset everything for demo
    # -----------------------------
    print("Resetting store...")
    c.session.post("http://127.0.0.1:8085/reset")

    # -----------------------------
    # Create products
    # -----------------------------
    print("\nCreating products...")
    drill = c.create_product(ProductIn(name="Drill", description="Cordless 18V", price=89.9, quantity=7, category="Tools"))
    bolt = c.create_product(ProductIn(name="Bolt", description="M8 steel", price=2.5, quantity=100, category="Hardware"))
    print(drill)
    print(bolt)

    # -----------------------------
    # List products
    # -----------------------------
    print("\nListing products...")
    for p in c.list_products():
        print(f"  {p.id}  {p.name:<10} qty={p.quantity:<4} {p.category}")

    # -----------------------------
    # Update (full replace)
    # -----------------------------
    print("\nRestocking the drill...")
    print(c.update_product(drill.id, ProductIn(name="Drill", description="Cordless 18V", price=89.9, quantity=25, category="Tools")))

    # -----------------------------
    # Delete
    # -----------------------------
    print("\nDeleting the bolt...")
    print(c.delete_product(bolt.id))

    print("\nRemaining products...")
    print(c.list_products())

if __name__ == "__main__":
    main()
