# weaviate_community/examples/quickstart.py
from weaviate_community import AuthApiKey, ClientConfig, GetBuilder, AggregateBuilder, WeaviateClient, models as M

cfg = ClientConfig(base_url="http://localhost:8080", auth=AuthApiKey("test-key"))

with WeaviateClient(cfg) as cli:
    print("live:", cli.is_live(), "ready:", cli.is_ready())

    # 1) class
    cli.schema.create_class(M.Class(
        class_name="Article",
        description="News articles",
        properties=[
            M.Property(name="title", data_type=["text"]),
            M.Property(name="wordCount", data_type=["int"]),
        ],
    ))

    # 2) objects
    res = cli.batch.objects_batch_add([
        M.Object(class_name="Article", properties={"title": "Vector search explained", "wordCount": 900}),
        M.Object(class_name="Article", properties={"title": "Approximate nearest neighbours", "wordCount": 1400}),
    ])
    print("added:", [r.id for r in res])

    # 3) Get
    query = (
        GetBuilder("Article", ["title", "wordCount"])
        .with_where('{path: ["wordCount"], operator: GreaterThan, valueInt: 1000}')
        .with_limit(5)
        .with_additional(["id"])
        .build()
    )
    print(query.query)
    print(cli.query.get(query))

    # 4) Aggregate
    agg = AggregateBuilder("Article").with_meta_count().with_fields(["wordCount { mean }"]).build()
    print(cli.query.aggregate(agg))

    cli.schema.delete("Article")
