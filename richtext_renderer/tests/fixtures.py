"""Sample query responses shared by the tests."""

EVENT_PATH = "/content/dam/wknd-shared/en/events/ski-touring"

DETAIL_RESPONSE = {
    "data": {
        "eventList": {
            "items": [
                {
                    "_path": EVENT_PATH,
                    "eventName": "Ski Touring <Basics>",
                    "slug": "ski-touring",
                    "capacity": "20",
                    "eventStart": "2026-12-01",
                    "eventEnd": "2026-12-03",
                    "teasingImage": {"_publishUrl": "https://publish.example/ski.jpg"},
                    "description": {
                        "json": [
                            {
                                "nodeType": "paragraph",
                                "content": [
                                    {"nodeType": "text", "value": "Learn the basics. "},
                                    {"nodeType": "reference", "data": {"path": "/content/dam/wknd/mountain.jpg"}},
                                ],
                            },
                            {
                                "nodeType": "paragraph",
                                "content": [
                                    {"nodeType": "text", "value": "See also "},
                                    {"nodeType": "reference", "data": {"href": "/content/dam/wknd/events/yoga"}},
                                    {"nodeType": "reference", "data": {"path": "/content/dam/wknd/deleted.jpg"}},
                                ],
                            },
                        ]
                    },
                }
            ],
            "_references": [
                {"_path": "/content/dam/wknd/mountain.jpg", "__typename": "ImageRef",
                 "_publishUrl": "https://publish.example/mountain.jpg"},
                {"_path": "/content/dam/wknd/events/yoga", "__typename": "EventModel",
                 "slug": "yoga-retreat", "eventName": "Yoga Retreat", "capacity": "12"},
            ],
        }
    }
}

LIST_RESPONSE = {
    "data": {
        "eventPaginated": {
            "edges": [
                {"node": {"_path": EVENT_PATH, "eventName": "Ski Touring", "slug": "ski-touring",
                          "teasingImage": {"_publishUrl": "https://publish.example/ski.jpg"},
                          "eventStart": "2026-12-01", "eventEnd": "2026-12-03"}},
                {"node": {"_path": "/content/dam/wknd/events/no-image", "eventName": "No Image"}},
                {"node": {"eventName": "No Path", "teasingImage": {"_publishUrl": "x"}}},
            ]
        }
    }
}
