"""Endpoint descriptors for every SkuVault operation.

Paths are relative to the API base URL. Bulk endpoints name the list key
their records are wrapped under and, where SkuVault documents one, the
maximum record count per call.
"""

from __future__ import annotations

from .request_builder import Endpoint


# -- Auth ---------------------------------------------------------------
GET_TOKENS = Endpoint("gettokens")

# -- Inventory ----------------------------------------------------------
ADD_ITEM = Endpoint("inventory/addItem")
ADD_ITEM_BULK = Endpoint("inventory/addItemBulk", bulk_key="Items", max_records=100)
GET_AVAILABLE_QUANTITIES = Endpoint("inventory/getAvailableQuantities")
GET_EXTERNAL_WAREHOUSE_QUANTITIES = Endpoint("inventory/getExternalWarehouseQuantities")
GET_EXTERNAL_WAREHOUSES = Endpoint("inventory/getExternalWarehouses")
GET_INVENTORY_BY_LOCATION = Endpoint("inventory/getInventoryByLocation")
GET_ITEM_QUANTITIES = Endpoint("inventory/getItemQuantities")
GET_KIT_QUANTITIES = Endpoint("inventory/getKitQuantities")
GET_LOCATIONS = Endpoint("inventory/getLocations")
GET_TRANSACTIONS = Endpoint("inventory/getTransactions")
GET_WAREHOUSE_ITEM_QUANTITIES = Endpoint("inventory/getWarehouseItemQuantities")
GET_WAREHOUSE_ITEM_QUANTITY = Endpoint("inventory/getWarehouseItemQuantity")
GET_WAREHOUSES = Endpoint("inventory/getWarehouses")
PICK_ITEM = Endpoint("inventory/pickItem")
REMOVE_ITEM = Endpoint("inventory/removeItem")
REMOVE_ITEM_BULK = Endpoint("inventory/removeItemBulk", bulk_key="Items")
SET_ITEM_QUANTITY = Endpoint("inventory/setItemQuantity")
SET_ITEM_QUANTITIES = Endpoint("inventory/setItemQuantities", bulk_key="Items")
UPDATE_EXTERNAL_WAREHOUSE_QUANTITIES = Endpoint(
    "inventory/updateExternalWarehouseQuantities", bulk_key="Quantities"
)

# -- Products -----------------------------------------------------------
CREATE_BRANDS = Endpoint("products/createBrands", bulk_key="Brands")
CREATE_KIT = Endpoint("products/createKit")
CREATE_PRODUCT = Endpoint("products/createProduct")
CREATE_PRODUCTS = Endpoint("products/createProducts", bulk_key="Items", max_records=100)
CREATE_SUPPLIERS = Endpoint("products/createSuppliers", bulk_key="Suppliers")
GET_BRANDS = Endpoint("products/getBrands")
GET_CLASSIFICATIONS = Endpoint("products/getClassifications")
GET_HANDLING_TIME = Endpoint("products/getHandlingTime")
GET_KITS = Endpoint("products/getKits")
GET_PRODUCTS = Endpoint("products/getProducts")
GET_SUPPLIERS = Endpoint("products/getSuppliers")
UPDATE_ALT_SKUS_CODES = Endpoint("products/updateAltSKUsCodes", bulk_key="Items")
UPDATE_HANDLING_TIME = Endpoint("products/updateHandlingTime", bulk_key="Items")
UPDATE_PRODUCT = Endpoint("products/updateProduct")
UPDATE_PRODUCTS = Endpoint("products/updateProducts", bulk_key="Items", max_records=100)

# -- Purchase orders ----------------------------------------------------
CREATE_PO = Endpoint("purchaseorders/createPO")
GET_INCOMING_ITEMS = Endpoint("purchaseorders/getIncomingItems")
GET_POS = Endpoint("purchaseorders/getPOs")
GET_RECEIVES_HISTORY = Endpoint("purchaseorders/getReceivesHistory")
RECEIVE_PO_ITEMS = Endpoint("purchaseorders/receivePOItems")
UPDATE_POS = Endpoint("purchaseorders/updatePOs", bulk_key="POs")

# -- Sales --------------------------------------------------------------
ADD_SHIPMENTS = Endpoint("sales/addShipments", bulk_key="Shipments")
CREATE_HOLDS = Endpoint("sales/createHolds", bulk_key="Holds")
GET_ONLINE_SALE_STATUS = Endpoint("sales/getOnlineSaleStatus", bulk_key="OrderIds", max_records=10_000)
GET_SALES = Endpoint("sales/getSales")
GET_SALES_BY_DATE = Endpoint("sales/getSalesByDate")
GET_SHIPMENTS = Endpoint("sales/getShipments")
GET_SOLD_ITEMS = Endpoint("sales/getSoldItems")
RELEASE_HELD_QUANTITIES = Endpoint("sales/releaseHeldQuantities")
SET_SHIPMENT_FILE = Endpoint("sales/setShipmentFile", bulk_key="Shipments")
SYNC_ONLINE_SALE = Endpoint("sales/syncOnlineSale")
SYNC_ONLINE_SALES = Endpoint("sales/syncOnlineSales", bulk_key="Sales", max_records=100)
SYNC_SHIPPED_SALE_AND_REMOVE_ITEMS = Endpoint("sales/syncShippedSaleAndRemoveItems")
UPDATE_ONLINE_SALE_STATUS = Endpoint("sales/updateOnlineSaleStatus")
UPDATE_SHIPMENTS = Endpoint("sales/updateShipments", bulk_key="Shipments")

# -- Integrations -------------------------------------------------------
GET_INTEGRATIONS = Endpoint("integration/getIntegrations")
