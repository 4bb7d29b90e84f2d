import scheduler as sc

graph = sc.DirectedGraph()
graph.add_vertices(range(1, 10))
graph.add_edges([(1, 2), (1, 8), (2, 3), (2, 8), (3, 6), (4, 3), (4, 5), (5, 6), (7, 8)])

schedule = sc.topological_sort(graph)

print(schedule)
