"""Sample web script responses for testing.

These fixtures mirror what the repository's indexing web scripts return:
the change-feed envelope (numeric fields as strings), node details with a
``properties`` list, and user authority objects.
"""

NODE_UUID = "5fa74ad3-9b5b-461b-9df5-de407f1f4fe7"
NODE_REF = f"workspace://SpacesStore/{NODE_UUID}"

# Change feed page with two documents
CHANGES_ENVELOPE = {
    "last_txn_id": "7",
    "last_acl_changeset_id": "3",
    "store_id": "SpacesStore",
    "store_protocol": "workspace",
    "docs": [
        {
            "uuid": NODE_UUID,
            "nodeRef": NODE_REF,
            "type": "cm:content",
            "name": "budget.xls",
            "deleted": False,
        },
        {
            "uuid": "0b2ad8a4-6a8c-4c5e-9d3f-2b2c2f1e9a11",
            "nodeRef": "workspace://SpacesStore/0b2ad8a4-6a8c-4c5e-9d3f-2b2c2f1e9a11",
            "type": "cm:folder",
            "name": "Documents",
            "deleted": False,
        },
    ],
}

# Envelope from a repository with nothing new to report
EMPTY_ENVELOPE = {
    "last_txn_id": "7",
    "last_acl_changeset_id": "3",
    "store_id": "SpacesStore",
    "store_protocol": "workspace",
}

# Node action envelope for a deleted node
TOMBSTONE_ENVELOPE = {
    "last_txn_id": "",
    "last_acl_changeset_id": "",
    "store_id": "SpacesStore",
    "store_protocol": "workspace",
    "docs": [
        {
            "uuid": NODE_UUID,
            "nodeRef": NODE_REF,
            "type": "cm:content",
            "deleted": True,
        },
    ],
}

NODE_DETAILS = {
    "uuid": NODE_UUID,
    "nodeRef": NODE_REF,
    "type": "cm:content",
    "name": "budget.xls",
    "aspects": ["cm:auditable", "cm:titled"],
    "properties": [
        {"name": "cm:title", "value": "Budget"},
        {"name": "cm:creator", "value": "admin"},
        {"name": "cm:created", "value": "2024-01-15T10:30:00.000Z"},
    ],
}

USER_ADMIN = {
    "username": "admin",
    "authorities": ["GROUP_EVERYONE", "GROUP_ALFRESCO_ADMINISTRATORS", "ROLE_ADMINISTRATOR"],
}

ALL_USERS = [
    {"username": "bob", "authorities": ["g1", "g2"]},
    USER_ADMIN,
]
