def test_import() -> None:
    import wgraph
    from wgraph import __version__
    assert isinstance(__version__, str)


def test_top_level_exports() -> None:
    import wgraph
    graph = wgraph.create_graph("edges")
    assert isinstance(graph, wgraph.Graph)
    assert isinstance(graph, wgraph.EdgeListGraph)
    assert issubclass(wgraph.InvalidArgumentError, wgraph.GraphError)
